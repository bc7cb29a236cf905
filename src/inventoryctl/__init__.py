"""inventoryctl — warehouse inventory backend (employees, sections, products)."""

__version__ = "0.1.0"
