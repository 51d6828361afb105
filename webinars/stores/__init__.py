from webinars.stores.in_memory import InMemoryWebinarStore
from webinars.stores.interfaces import WebinarStore

__all__ = ["WebinarStore", "InMemoryWebinarStore"]
