"""selector_builder: fluent, order-checked CSS selector construction."""

__version__ = "0.1.0"

from selector_builder.builder import SelectorBuilder, Stringifiable  # noqa: E402
from selector_builder.errors import CountError, OrderError, SelectorError  # noqa: E402
from selector_builder.facade import (  # noqa: E402
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selector_builder.model import PartKind  # noqa: E402

__all__ = [
    # builder
    "SelectorBuilder",
    "Stringifiable",
    # model
    "PartKind",
    # errors
    "SelectorError",
    "OrderError",
    "CountError",
    # facade
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]
