"""Error surfaced by the record store. One type; the message says what went wrong."""


class StoreError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
