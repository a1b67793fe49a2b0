"""ORM model registry — import all models so Alembic autogenerate discovers them."""

from comuni_api.models.comune import Comune

__all__ = [
    "Comune",
]
