"""
Backend Selection — однократный выбор backend на процесс

Выбор выполняется один раз до первой арифметической операции и больше не
пересматривается:
- AUTO: native, если runtime его поддерживает, иначе limb
- NATIVE: native или BackendUnavailableError (fatal)
- LIMB: всегда доступен

Повторный select с тем же видом (или AUTO) идемпотентен; запрос другого
конкретного вида → BackendAlreadySelectedError.
"""

import logging
import threading
from typing import Callable, Optional

from pydantic import BaseModel, Field

from src.backend import native_backend
from src.backend.contract import BackendKind, IntegerBackend
from src.backend.limb_backend import LimbBackend
from src.backend.native_backend import NativeBackend
from src.core.math.errors import BackendAlreadySelectedError, BackendUnavailableError
from src.core.math.hybrid import HybridArithmetic

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class BackendConfig(BaseModel):
    """Запрос на выбор backend."""

    kind: BackendKind = Field(default=BackendKind.AUTO, description="Вид backend")

    model_config = {"frozen": True}


# =============================================================================
# REGISTRY
# =============================================================================


class BackendRegistry:
    """
    Хранилище единственного выбранного backend.

    Args:
        native_probe: Проверка доступности native backend
            (по умолчанию native_backend.is_available)
    """

    def __init__(self, native_probe: Optional[Callable[[], bool]] = None):
        self._native_probe = native_probe or native_backend.is_available
        self._lock = threading.Lock()
        self._backend: Optional[IntegerBackend] = None
        self._arithmetic: Optional[HybridArithmetic] = None

    @property
    def selected(self) -> Optional[IntegerBackend]:
        return self._backend

    def select(self, config: Optional[BackendConfig] = None) -> IntegerBackend:
        """
        Выбор backend.

        Raises:
            BackendUnavailableError: NATIVE запрошен, но недоступен
            BackendAlreadySelectedError: Уже выбран backend другого вида
        """
        config = config or BackendConfig()
        with self._lock:
            if self._backend is not None:
                if config.kind in (BackendKind.AUTO, self._backend.kind):
                    logger.debug("Backend already selected: %s", self._backend.name)
                    return self._backend
                raise BackendAlreadySelectedError(
                    f"Backend '{self._backend.name}' already selected, "
                    f"cannot switch to '{config.kind.value}'"
                )

            backend = self._create(config.kind)
            self._backend = backend
            self._arithmetic = HybridArithmetic(backend)
            logger.info("Integer backend selected: %s", backend.name)
            return backend

    def get(self) -> IntegerBackend:
        """Выбранный backend; при первом обращении выбирается AUTO."""
        if self._backend is None:
            return self.select()
        return self._backend

    def arithmetic(self) -> HybridArithmetic:
        """HybridArithmetic, связанный с выбранным backend; при первом обращении выбирается AUTO."""
        if self._arithmetic is None:
            self.select()
        return self._arithmetic

    def _create(self, kind: BackendKind) -> IntegerBackend:
        if kind == BackendKind.LIMB:
            return LimbBackend()

        if self._native_probe():
            return NativeBackend()
        if kind == BackendKind.NATIVE:
            raise BackendUnavailableError(
                "Native arbitrary-precision integers are not supported by this runtime"
            )

        logger.warning("Native integers unavailable, falling back to limb backend")
        return LimbBackend()


# Процессный реестр
_REGISTRY = BackendRegistry()


def select_backend(config: Optional[BackendConfig] = None) -> IntegerBackend:
    return _REGISTRY.select(config)


def get_backend() -> IntegerBackend:
    return _REGISTRY.get()


def get_arithmetic() -> HybridArithmetic:
    return _REGISTRY.arithmetic()
