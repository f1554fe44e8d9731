from .api import ApiClient
from .complaints import ComplaintApi
from .notifications import Notifier
from .storage import Storage

__all__ = ['ApiClient', 'ComplaintApi', 'Notifier', 'Storage']
