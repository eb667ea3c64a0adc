"""
Test Factory to make fake objects for testing
"""

import factory
from factory.fuzzy import FuzzyChoice, FuzzyInteger


class CartItemFactory(factory.Factory):
    """Creates fake cart item payloads for testing"""

    class Meta:  # pylint: disable=too-few-public-methods
        """Cart items are free-form documents, so the factory builds dicts"""

        model = dict

    product = factory.Faker("word")
    quantity = FuzzyInteger(1, 10)
    color = FuzzyChoice(choices=["red", "green", "blue", "black"])
