"""Validator registry and factory.

The factory keeps one prototype instance per validator short name. The
registry is filled lazily, on first use, by scanning the
``proofreader.validator`` package tree (and, optionally, an entry-point
group) for concrete :class:`Validator` subclasses. Names missing from the
registry are looked up in a fixed, ordered list of candidate packages and
cached on success.

Prototypes are never handed out: every ``get_instance`` call builds a fresh
validator and binds its configuration with ``pre_init``.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import threading
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from importlib.metadata import entry_points
from types import ModuleType
from typing import Any

from pydantic import ValidationError

from proofreader.config.models import Configuration, ValidatorConfiguration, format_property_value
from proofreader.config.settings import get_settings
from proofreader.logging_config import get_logger
from proofreader.validator.base import Validator
from proofreader.validator.exceptions import NoSuchValidatorError, ValidatorConstructionError
from proofreader.validator.naming import (
    validator_class_name,
    validator_module_name,
    validator_name,
)

__all__ = [
    "VALIDATOR_PACKAGE",
    "VALIDATOR_PACKAGES",
    "ValidatorFactory",
    "get_configurations",
    "get_default_factory",
    "get_instance",
    "to_strings",
]

logger = get_logger(__name__)

VALIDATOR_PACKAGE = "proofreader.validator"

# Fallback search order; first match wins
VALIDATOR_PACKAGES: tuple[str, ...] = (
    VALIDATOR_PACKAGE,
    f"{VALIDATOR_PACKAGE}.sentence",
    f"{VALIDATOR_PACKAGE}.section",
)


def to_strings(properties: Mapping[str, Any]) -> dict[str, str]:
    """Render property defaults as strings.

    Sequence values are joined with commas; scalars use their string form.

    Args:
        properties: Property name to value mapping.

    Returns:
        Property name to string mapping, in the same order.

    """
    return {key: format_property_value(value) for key, value in properties.items()}


def _create_validator(validator_class: type[Validator]) -> Validator:
    try:
        return validator_class()
    except Exception as e:
        raise ValidatorConstructionError(validator_class, str(e)) from e


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_concrete_validator(obj: Any) -> bool:
    return (
        isinstance(obj, type)
        and issubclass(obj, Validator)
        and not inspect.isabstract(obj)
    )


def _validator_classes(module: ModuleType) -> Iterator[type[Validator]]:
    """Yield concrete validator classes defined in *module* itself."""
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__ and _is_concrete_validator(obj):
            yield obj


def _import_if_present(module_name: str) -> ModuleType | None:
    """Import *module_name*, returning None only if it does not exist.

    Errors raised while executing an existing module propagate.
    """
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        missing = e.name or ""
        if missing and (module_name == missing or module_name.startswith(f"{missing}.")):
            return None
        raise


class ValidatorFactory:
    """Registry of validator prototypes and factory of configured validators.

    Attributes:
        root_package: Package tree scanned at discovery time.
        packages: Candidate packages searched, in order, for unknown names.
        entry_point_group: Entry-point group scanned at discovery time, or
            None to skip entry points.

    """

    def __init__(
        self,
        root_package: str = VALIDATOR_PACKAGE,
        packages: Iterable[str] = VALIDATOR_PACKAGES,
        entry_point_group: str | None = None,
        discover: bool = True,
    ) -> None:
        """Initialize the factory.

        Args:
            root_package: Package tree scanned at discovery time.
            packages: Candidate packages for the fallback loader, in priority order.
            entry_point_group: Optional entry-point group scanned at discovery time.
            discover: If False, start with an empty registry and rely on
                explicit registration and the fallback loader.

        """
        self.root_package = root_package
        self.packages = tuple(packages)
        self.entry_point_group = entry_point_group
        self._validators: dict[str, Validator] = {}
        self._lock = threading.RLock()
        self._discovered = not discover

    # -- Registration ------------------------------------------------------

    def register(self, validator_class: type[Validator]) -> str:
        """Register *validator_class* under its canonical short name.

        Builds one prototype instance. An existing entry with the same name
        is replaced.

        Args:
            validator_class: A concrete Validator subclass.

        Returns:
            The name the class was registered under.

        Raises:
            TypeError: If *validator_class* is not a Validator subclass.
            ValidatorConstructionError: If the class cannot be built without arguments.

        """
        if not (isinstance(validator_class, type) and issubclass(validator_class, Validator)):
            raise TypeError(f"Not a Validator subclass: {validator_class!r}")

        prototype = _create_validator(validator_class)
        name = validator_name(validator_class)

        with self._lock:
            existing = self._validators.get(name)
            if existing is not None and type(existing) is not validator_class:
                logger.warning(
                    "validator_name_collision",
                    name=name,
                    replaced=_qualified_name(type(existing)),
                    replaced_by=_qualified_name(validator_class),
                )
            self._validators[name] = prototype

        logger.debug(
            "validator_registered",
            name=name,
            validator_class=_qualified_name(validator_class),
        )
        return name

    def try_register(self, validator_class: type[Validator]) -> bool:
        """Register *validator_class*, skipping it if it cannot be built.

        Used during discovery only: one broken validator must not keep the
        others from loading.

        Returns:
            True if the class was registered.

        """
        try:
            self.register(validator_class)
        except ValidatorConstructionError as e:
            logger.debug(
                "validator_skipped",
                validator_class=_qualified_name(validator_class),
                error=e.message,
            )
            return False
        return True

    # -- Discovery ---------------------------------------------------------

    def discover(self) -> None:
        """Scan the root package (and entry points) and register what is found."""
        with self._lock:
            for validator_class in self._scan_package(self.root_package):
                self.try_register(validator_class)

            if self.entry_point_group:
                for validator_class in self._scan_entry_points(self.entry_point_group):
                    self.try_register(validator_class)

            self._discovered = True

        logger.debug(
            "validator_discovery_complete",
            root_package=self.root_package,
            count=len(self._validators),
        )

    def _ensure_discovered(self) -> None:
        if self._discovered:
            return
        with self._lock:
            if not self._discovered:
                self.discover()

    def _scan_package(self, package_name: str) -> Iterator[type[Validator]]:
        try:
            package = importlib.import_module(package_name)
        except Exception as e:
            logger.error(
                "validator_package_import_failed",
                package=package_name,
                error=str(e),
            )
            return

        yield from _validator_classes(package)

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return

        def _on_error(name: str) -> None:
            logger.warning("validator_package_import_failed", package=name)

        for module_info in pkgutil.walk_packages(
            search_path, prefix=f"{package.__name__}.", onerror=_on_error
        ):
            try:
                module = importlib.import_module(module_info.name)
            except Exception as e:
                logger.warning(
                    "validator_module_import_failed",
                    module=module_info.name,
                    error=str(e),
                )
                continue

            yield from _validator_classes(module)

    def _scan_entry_points(self, group: str) -> Iterator[type[Validator]]:
        for entry_point in entry_points(group=group):
            try:
                target = entry_point.load()
            except Exception as e:
                logger.warning(
                    "validator_entry_point_failed",
                    entry_point=entry_point.name,
                    error=str(e),
                )
                continue

            if not _is_concrete_validator(target):
                logger.warning(
                    "validator_entry_point_ignored",
                    entry_point=entry_point.name,
                    target=repr(target),
                )
                continue

            logger.debug("validator_entry_point_loaded", entry_point=entry_point.name)
            yield target

    # -- Lookup ------------------------------------------------------------

    def names(self) -> list[str]:
        """Return the registered short names, in registration order."""
        self._ensure_discovered()
        with self._lock:
            return list(self._validators)

    def __contains__(self, name: object) -> bool:
        self._ensure_discovered()
        with self._lock:
            return name in self._validators

    def __len__(self) -> int:
        self._ensure_discovered()
        with self._lock:
            return len(self._validators)

    def get_configurations(self, lang: str) -> list[ValidatorConfiguration]:
        """List default configurations of the validators applicable to *lang*.

        A validator applies when its supported languages are empty or
        include *lang*.

        Args:
            lang: Language code.

        Returns:
            One configuration per applicable validator, carrying its default
            properties as strings.

        """
        self._ensure_discovered()
        with self._lock:
            prototypes = list(self._validators.items())

        return [
            ValidatorConfiguration(name=name, properties=to_strings(prototype.properties))
            for name, prototype in prototypes
            if prototype.supports_language(lang)
        ]

    def get_instance(
        self,
        config: ValidatorConfiguration | str,
        global_config: Configuration | None = None,
    ) -> Validator:
        """Build a configured validator.

        Args:
            config: The validator's configuration record, or just its short
                name for a validator with default properties.
            global_config: Global settings; defaults to a configuration
                holding only *config*.

        Returns:
            A new validator with ``pre_init`` applied.

        Raises:
            NoSuchValidatorError: If the name resolves to no validator.
            ValidatorConstructionError: If the validator cannot be built.
            ConfigurationError: If ``pre_init`` rejects the configuration.

        """
        if isinstance(config, str):
            try:
                global_config = Configuration.for_validator(config)
            except ValidationError:
                raise NoSuchValidatorError(config) from None
            config = global_config.validator_configs[0]
        elif global_config is None:
            global_config = Configuration(validator_configs=[config])

        validator_class = self._resolve(config.name)
        validator = _create_validator(validator_class)
        validator.pre_init(config, global_config)

        logger.debug(
            "validator_created",
            name=config.name,
            lang=global_config.lang,
            overrides=sorted(config.properties),
        )
        return validator

    def _resolve(self, name: str) -> type[Validator]:
        self._ensure_discovered()
        # Lookup, load and register happen as one step
        with self._lock:
            prototype = self._validators.get(name)
            if prototype is not None:
                return type(prototype)
            return self._load_plugin(name)

    def _load_plugin(self, name: str) -> type[Validator]:
        for package_name in self.packages:
            validator_class = self._find_class(package_name, name)
            if validator_class is None:
                continue

            self.register(validator_class)
            logger.info(
                "validator_plugin_loaded",
                name=name,
                package=package_name,
                validator_class=_qualified_name(validator_class),
            )
            return validator_class

        raise NoSuchValidatorError(name)

    @staticmethod
    def _find_class(package_name: str, name: str) -> type[Validator] | None:
        class_name = validator_class_name(name)

        package = _import_if_present(package_name)
        if package is None:
            return None

        candidate = getattr(package, class_name, None)
        if candidate is None and hasattr(package, "__path__"):
            module = _import_if_present(f"{package_name}.{validator_module_name(name)}")
            if module is not None:
                candidate = getattr(module, class_name, None)

        if isinstance(candidate, type) and issubclass(candidate, Validator):
            return candidate
        return None


@lru_cache(maxsize=1)
def get_default_factory() -> ValidatorFactory:
    """Get the process-wide factory.

    Returns:
        The shared ValidatorFactory, scanning entry points as configured
        in settings.

    """
    settings = get_settings()
    group = settings.entry_point_group if settings.load_entry_points else None
    return ValidatorFactory(entry_point_group=group)


def get_instance(
    config: ValidatorConfiguration | str,
    global_config: Configuration | None = None,
) -> Validator:
    """Build a configured validator with the process-wide factory."""
    return get_default_factory().get_instance(config, global_config)


def get_configurations(lang: str) -> list[ValidatorConfiguration]:
    """List default configurations for *lang* from the process-wide factory."""
    return get_default_factory().get_configurations(lang)
