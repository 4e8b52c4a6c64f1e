from enum import Enum


class UIStyle(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    DIM = "dim"
