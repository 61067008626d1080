"""
Example 02: Model Mapping

This example demonstrates transforming records into Python dataclasses and
Pydantic models, and reusing a schema through a mapper.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from remap import Engine


@dataclass
class UserDataclass:
    """User model using dataclass"""
    id: int
    name: str
    email: str


class UserPydantic(BaseModel):
    """User model using Pydantic"""
    id: int
    name: str
    email: str


API_ROWS = [
    {"user_id": "1", "profile": {"first": "Alice", "last": "Liddell", "mail": "alice@example.com"}},
    {"user_id": "2", "profile": {"first": "Bob", "last": "Dylan", "mail": "bob@example.com"}},
]

SCHEMA = {
    "id": "user_id",
    "name": {
        "path": ["profile.first", "profile.last"],
        "fn": lambda v, *_: f"{v['first']} {v['last']}",
    },
    "email": "profile.mail",
}


def main():
    engine = Engine()

    print("=== Model Mapping ===\n")

    # Map to dataclass
    print("1. Dataclass Mapping:")
    schema = {**SCHEMA, "id": lambda it, *_: int(it["user_id"])}
    user = engine.transform(schema, API_ROWS[0], UserDataclass)
    print(f"   Type: {type(user).__name__}")
    print(f"   Data: {user}\n")

    # Map to Pydantic model through a reusable mapper
    print("2. Pydantic Model Mapping:")
    mapper = engine.mapper(SCHEMA, target_type=UserPydantic)
    users = mapper(API_ROWS)
    print(f"   Count: {len(users)} users")
    for u in users:
        print(f"   - {u.name}: {u.email} (id={u.id})")
    print()


if __name__ == "__main__":
    main()
