class RateComparatorError(Exception):
    pass


class ProviderError(RateComparatorError):
    pass
