from typing import TYPE_CHECKING, Hashable, Iterable

if TYPE_CHECKING:
    from ..base_container import BaseContainer


def bind_use_cases(
    container: "BaseContainer",
    use_case_classes: Iterable[type],
    repository_key: Hashable,
    argument: str,
) -> None:
    """
    Register a factory per use case class.

    Each factory resolves ``repository_key`` at call time and passes it to
    the use case under the keyword ``argument``, so swapping the repository
    registration later (tests do) is picked up by every use case.
    """
    for use_case_class in use_case_classes:
        container.register_factory(
            use_case_class,
            lambda use_case_class=use_case_class: use_case_class(
                **{argument: container.get(repository_key)}
            ),
        )
