import random

from faker import Faker

PRODUCT_ADJECTIVES = (
    "Ergonomic", "Handcrafted", "Sleek", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Practical", "Refined", "Recycled", "Luxurious", "Modern", "Elegant", "Tasty", "Unbranded",
)
PRODUCTS = (
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves", "Pants", "Shirt",
    "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna", "Chicken", "Fish", "Cheese", "Bacon",
)
DEPARTMENTS = (
    "Books", "Movies", "Music", "Games", "Electronics", "Computers", "Home", "Garden", "Tools",
    "Grocery", "Health", "Beauty", "Toys", "Kids", "Baby", "Clothing", "Shoes", "Jewelery",
    "Sports", "Outdoors", "Automotive", "Industrial",
)

TEMPLATES = (
    "{company} is known for {adjective} {product}s and {buzz}.",
    "Based on recent data, {company} has been focusing on {department} with {buzz}.",
    "{company}'s reputation centers around {adjective} quality and {buzz}.",
    "Industry experts describe {company} as {buzz} with strong {department} presence.",
    "{company} stands out for {adjective} {product}s and commitment to {buzz}.",
)

_faker = Faker()


def generate_response_text(faker: Faker | None = None, rng: random.Random | None = None) -> str:
    """Fill one of the fixed templates with random company and product tokens."""
    faker = faker or _faker
    rng = rng or random
    template = rng.choice(TEMPLATES)
    return template.format(
        company=faker.company(),
        adjective=faker.random_element(PRODUCT_ADJECTIVES),
        product=faker.random_element(PRODUCTS),
        department=faker.random_element(DEPARTMENTS),
        buzz=faker.bs(),
    )
