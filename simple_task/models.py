from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A single to-do record.

    Frozen so that the copy handed to the form can never alias the stored one;
    edits go through ``dataclasses.replace``.
    """

    id: str
    title: str
    done: bool = False
