"""Errores del ciclo de vida del pool de Postgres (init doble / uso sin init)."""


class PoolStateError(RuntimeError):
    """El pool no está en el estado que la operación necesita."""


class PoolAlreadyInitializedError(PoolStateError):
    pass


class PoolNotInitializedError(PoolStateError):
    pass
