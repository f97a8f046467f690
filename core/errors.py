"""Error taxonomy shared by the record store, validator and persistence layer."""


class WeightTrackerError(Exception):
    pass


class InvalidDate(WeightTrackerError, ValueError):
    pass


class InvalidWeight(WeightTrackerError, ValueError):
    pass


class DuplicateDate(WeightTrackerError):
    def __init__(self, date):
        super().__init__(f"A record for {date:%d-%m-%Y} already exists")
        self.date = date


class IndexOutOfRange(WeightTrackerError, IndexError):
    pass


class InvalidHeader(WeightTrackerError, ValueError):
    pass


class PersistenceIOError(WeightTrackerError):
    """Reading or writing the records file failed."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path
