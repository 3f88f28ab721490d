from fitbit_api.clients.base import BaseClient
from fitbit_api.clients.session import HttpClient
from fitbit_api.clients.fitbit import FitbitClient

__all__ = ['BaseClient', 'HttpClient', 'FitbitClient']
