from .max_bytes import MaxBytesDeserializer, MaxBytesExceededError

__all__ = [
    'MaxBytesDeserializer',
    'MaxBytesExceededError',
]
