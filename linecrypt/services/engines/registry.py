from typing import Type

from linecrypt.core.exceptions import StageNotFoundError
from linecrypt.models.schemas import StageType
from linecrypt.services.engines.base import CipherStage


class StageRegistry:
    """
    Registry for cipher stages.

    Manages available cipher stages and provides lookup by type.
    """

    _stages: dict[StageType, Type[CipherStage]] = {}
    _instances: dict[StageType, CipherStage] = {}

    @classmethod
    def register(cls, stage_class: Type[CipherStage]) -> Type[CipherStage]:
        """
        Register a cipher stage class.

        Can be used as a decorator:
            @StageRegistry.register
            class PrintableShiftStage(CipherStage):
                ...

        Args:
            stage_class: The stage class to register

        Returns:
            The stage class (for decorator usage)
        """
        cls._stages[stage_class.stage_type] = stage_class
        return stage_class

    def get_stage(self, stage_type: StageType) -> CipherStage | None:
        """
        Get a stage instance for the specified stage type.

        Args:
            stage_type: The type of stage

        Returns:
            Stage instance or None if not found
        """
        if stage_type not in self._stages:
            return None

        # Lazy instantiation with caching
        if stage_type not in self._instances:
            self._instances[stage_type] = self._stages[stage_type]()

        return self._instances[stage_type]

    def require_stage(self, stage_type: StageType) -> CipherStage:
        """Get a stage instance, raising StageNotFoundError if it is unknown."""
        stage = self.get_stage(stage_type)
        if stage is None:
            raise StageNotFoundError(str(stage_type.value))
        return stage

    def get_all_stages(self) -> list[CipherStage]:
        """
        Get all registered stages.

        Returns:
            List of all stage instances
        """
        return [self.require_stage(stage_type) for stage_type in self.list_registered()]

    @classmethod
    def list_registered(cls) -> list[StageType]:
        """
        List all registered stage types in StageType declaration order.

        Returns:
            List of registered stage types
        """
        return [stage_type for stage_type in StageType if stage_type in cls._stages]

    @classmethod
    def is_registered(cls, stage_type: StageType) -> bool:
        """
        Check if a stage type is registered.

        Args:
            stage_type: The stage type to check

        Returns:
            True if registered
        """
        return stage_type in cls._stages


# Import stages to trigger registration
def _load_stages() -> None:
    """Load all stage modules to trigger registration."""
    from linecrypt.services.engines.substitution import printable_shift  # noqa: F401
    from linecrypt.services.engines.transposition import block  # noqa: F401


# Load stages when module is imported
_load_stages()
