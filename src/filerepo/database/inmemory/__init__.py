from filerepo.database.inmemory.repo import InMemoryRepository

__all__ = ["InMemoryRepository"]
