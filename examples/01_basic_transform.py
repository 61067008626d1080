"""
Example 01: Basic Transform

This example demonstrates the five schema action forms against a single record
and a list of records.
"""

from remap import Selector, transform


def main():
    source = {
        "foo": {"bar": "bar", "baz": "value1"},
        "items": [{"price": 10}, {"price": 32}],
        "tags": ["new", "sale"],
    }

    schema = {
        "bar": "foo.bar",  # Path
        "first_tag": "tags.0",  # Path with a list index
        "qux": ["foo.bar", "foo.baz"],  # Aggregator
        "total": lambda iteratee, source, target: sum(i["price"] for i in iteratee["items"]),  # Function
        "shout": {"path": "foo.baz", "fn": lambda value, *_: value.upper()},  # Selector
        "both": Selector(["foo.bar", "foo.baz"], lambda v, *_: "/".join(v.values())),
        "meta": {"first_price": "items.0.price", "missing": "nope.nothing"},  # Nested schema
    }

    print("=== Single Record ===\n")
    print(f"   {transform(schema, source)}\n")

    print("=== Batch ===\n")
    people = [
        {"name": {"first": "Ada", "last": "Lovelace"}},
        {"name": {"first": "Alan", "last": "Turing"}},
    ]
    people_schema = {
        "first": "name.first",
        "position": lambda it, src, target: src.index(it) + 1,
    }
    for row in transform(people_schema, people):
        print(f"   {row}")
    print()


if __name__ == "__main__":
    main()
