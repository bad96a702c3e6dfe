"""Text placeholder grammar.

A placeholder body names a field, optionally followed by pipe-separated
transforms: ``{name}``, ``{value|upper}``, ``{title|trim|truncate:20}``.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["TRANSFORMS", "Placeholder", "Transform", "parse_placeholder"]

TRANSFORMS: frozenset[str] = frozenset({"upper", "lower", "capitalize", "trim", "truncate"})


@dataclass(frozen=True, slots=True)
class Transform:
    """One transform step applied to a substituted value.

    Attributes:
        name: Transform name as written (stripped)
        argument: Text after ':' or None when absent
    """

    name: str
    argument: str | None = None

    @property
    def source(self) -> str:
        """Transform as written in the pattern."""
        if self.argument is None:
            return self.name
        return f"{self.name}:{self.argument}"

    @property
    def is_known(self) -> bool:
        """True if the transform exists and its argument fits it."""
        if self.name not in TRANSFORMS:
            return False
        if self.name == "truncate":
            return self.argument is not None and self.argument.isdigit()
        return self.argument is None


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Parsed placeholder body."""

    name: str
    transforms: tuple[Transform, ...] = ()


def parse_placeholder(text: str) -> Placeholder:
    """Split a placeholder body into field name and transforms.

    Example:
        >>> parse_placeholder("title|truncate:5")
        Placeholder(name='title', transforms=(Transform(name='truncate', argument='5'),))
    """
    name, *steps = text.split("|")
    transforms = []
    for step in steps:
        transform_name, separator, argument = step.partition(":")
        transforms.append(
            Transform(transform_name.strip(), argument.strip() if separator else None)
        )
    return Placeholder(name.strip(), tuple(transforms))
