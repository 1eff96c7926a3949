from enum import Enum


class ScreenState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    CONTENT = "content"
    NOT_FOUND = "not_found"
