"""Dashboard Gateway.

GraphQL gateway that aggregates weather, stock, crypto, podcast and Bible
providers behind one cached, normalized schema.
"""

__version__ = "0.1.0"
