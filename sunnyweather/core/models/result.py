# sunnyweather/core/models/result.py
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Итог асинхронной операции: либо значение, либо ошибка.

    Создаётся только через Result.success() / Result.failure().
    """
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        if error is None:
            raise ValueError("Result.failure требует исключение")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_none(self) -> Optional[T]:
        return self.value if self.is_success else None

    def exception_or_none(self) -> Optional[BaseException]:
        return self.error

    def get_or_raise(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self) -> str:
        if self.is_success:
            return f"Success({self.value!r})"
        return f"Failure({self.error!r})"
