"""Demo run: a small catalog pushed through the reference checkout scenarios."""

import logging
from datetime import date, timedelta
from typing import Callable, Dict, List, Tuple

from shopfront.config import settings
from shopfront.constants import ERROR_PREFIX
from shopfront.domain.cart import Cart
from shopfront.domain.customer import Customer
from shopfront.domain.errors import CheckoutError
from shopfront.domain.items import Item, non_perishable, shippable
from shopfront.services.checkout import checkout


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def demo_catalog(today: date) -> Dict[str, Item]:
    return {
        "cheese": shippable("Cheese", 100, 5, "0.2", today + timedelta(days=7)),
        "tv": shippable("TV", 500, 3, "5.0"),
        "scratch_card": non_perishable("Mobile Scratch Card", 50, 10, needs_shipping=False),
        "biscuits": shippable("Biscuits", 150, 4, "0.7", today + timedelta(days=30)),
        "expired_cheese": shippable("Expired Cheese", 100, 5, "0.2", today - timedelta(days=1)),
    }


def run_scenario(customer: Customer, picks: List[Tuple[Item, int]], today: date) -> str:
    cart = Cart()
    try:
        for item, qty in picks:
            cart.reserve(item, qty, today)
    except CheckoutError as e:
        return f"{ERROR_PREFIX}{e}"
    return checkout(customer, cart, today).text


def main() -> None:
    configure_logging()

    today = date.today()
    c = demo_catalog(today)
    ahmed = Customer("Ahmed Mohamed", 1000)

    scenarios: List[Tuple[str, Callable[[], str]]] = [
        ("Successful Checkout",
         lambda: run_scenario(ahmed, [(c["cheese"], 2), (c["biscuits"], 1), (c["scratch_card"], 1)], today)),
        ("Empty Cart",
         lambda: run_scenario(ahmed, [], today)),
        ("Insufficient Balance",
         lambda: run_scenario(Customer("Eslam Zanaty", 50), [(c["tv"], 2)], today)),
        ("Insufficient Quantity",
         lambda: run_scenario(ahmed, [(c["cheese"], 10)], today)),
        ("Expired Product",
         lambda: run_scenario(ahmed, [(c["expired_cheese"], 1)], today)),
        ("Non-Shippable Items Only",
         lambda: run_scenario(ahmed, [(c["scratch_card"], 3)], today)),
        ("Large Order with Shipping",
         lambda: run_scenario(Customer("Rana Osman", 5000), [(c["tv"], 2), (c["cheese"], 1)], today)),
    ]

    for n, (title, run) in enumerate(scenarios, start=1):
        print(f"=========== Test Case {n}: {title} ===========")
        print(run())
        print()


if __name__ == "__main__":
    main()
