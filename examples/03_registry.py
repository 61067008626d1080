"""
Example 03: Mapper Registry

This example demonstrates registering one schema per target type and mapping
by type.
"""

from dataclasses import dataclass

from remap import MapperRegistry


@dataclass
class Invoice:
    """Invoice read model"""
    number: str
    customer: str
    amount: float


def main():
    registry = MapperRegistry()
    registry.register(
        Invoice,
        {
            "number": "ref",
            "customer": "billing.customer.name",
            "amount": {"path": "billing.cents", "fn": lambda cents, *_: cents / 100},
        },
    )

    rows = [
        {"ref": "INV-1", "billing": {"customer": {"name": "Acme"}, "cents": 12050}},
        {"ref": "INV-2", "billing": {"customer": {"name": "Globex"}, "cents": 999}},
    ]

    print("=== Registry ===\n")
    for invoice in registry.map(Invoice, rows):
        print(f"   {invoice}")
    print()


if __name__ == "__main__":
    main()
