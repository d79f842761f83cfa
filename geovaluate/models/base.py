from typing import Protocol

class TextModel(Protocol):
    """
    Anything that turns a prompt into raw reply text.
    Calls are blocking; callers run them in a worker thread.
    """
    name: str

    def generate(self, prompt: str) -> str:
        ...
