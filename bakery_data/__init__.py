from .generator import DataGenerator
from .random_stream import RandomStream
from .storage import DemoStore

__all__ = ["DataGenerator", "DemoStore", "RandomStream"]
