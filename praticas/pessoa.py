"""A person with a name and an age."""

from dataclasses import dataclass


@dataclass
class Pessoa:
    """A person, printed as ``[name,age]``."""

    name: str = ""
    age: int = 0

    def update(self, name: str, age: int) -> None:
        """Replace both name and age."""
        self.name = name
        self.age = age

    def __str__(self) -> str:
        return f"[{self.name},{self.age}]"