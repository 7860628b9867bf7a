"""Generic in-memory repository keyed by entity id."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar


class _ComId(Protocol):
    id: int


T = TypeVar("T", bound=_ComId)


class EntidadeNaoEncontrada(LookupError):
    """Raised when no entity with the requested id is stored."""

    def __init__(self, id_: int, mensagem: str | None = None) -> None:
        self.id = id_
        super().__init__(mensagem or f"Entidade com ID {id_} nao encontrada.")


class Repositorio(Generic[T]):
    """Holds references to entities by id; it never owns or destroys them."""

    def __init__(self) -> None:
        self._entidades: dict[int, T] = {}

    def adicionar(self, entidade: T) -> None:
        """Store an entity, replacing any previous one with the same id."""
        if entidade is None:
            raise ValueError("A entidade nao pode ser nula.")
        self._entidades[entidade.id] = entidade

    def buscar_por_id(self, id_: int) -> T:
        """Return the entity with this id or raise EntidadeNaoEncontrada."""
        try:
            return self._entidades[id_]
        except KeyError:
            raise EntidadeNaoEncontrada(id_) from None

    def buscar_todos(self) -> list[T]:
        """Return every stored entity, ordered by id."""
        return [self._entidades[chave] for chave in sorted(self._entidades)]

    def remover(self, id_: int) -> None:
        """Forget the entity with this id or raise EntidadeNaoEncontrada."""
        if id_ not in self._entidades:
            raise EntidadeNaoEncontrada(
                id_, f"Entidade com ID {id_} nao encontrada ao tentar remover."
            )
        del self._entidades[id_]

    def __len__(self) -> int:
        return len(self._entidades)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._entidades