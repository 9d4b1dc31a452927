from .base import BaseAPIProvider, ExchangeRateProvider
from .first_api import FirstApiProvider
from .second_api import SecondApiProvider
from .third_api import ThirdApiProvider

__all__ = [
    'ExchangeRateProvider',
    'BaseAPIProvider',
    'FirstApiProvider',
    'SecondApiProvider',
    'ThirdApiProvider',
]
