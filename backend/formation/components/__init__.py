"""
Element renderers.

Each module adds one family of elements; FormBuilder combines them.
"""

from .base import Component
from .labels import LabelElements
from .inputs import InputElements
from .choices import ChoiceElements

__all__ = [
    "Component",
    "LabelElements",
    "InputElements",
    "ChoiceElements",
]
