"""
In-memory configuration store.

The store owns one StoreState (attribute library, category tree,
manufacturer registry and core attributes) and publishes a new state
only when a mutation finishes: every write goes through transaction(),
which hands the operation a deep copy and swaps it in on success. A
mutation that raises leaves the published state exactly as it was.
"""
import copy
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
from loguru import logger
from asset_attributes.core.seed import SEED_DATA
from asset_attributes.schemas.attribute import Attribute
from asset_attributes.schemas.category import Category
from asset_attributes.schemas.core_attribute import CoreAttribute
from asset_attributes.schemas.manufacturer import Manufacturer
from asset_attributes.engine.categories import CategoryAttributeConfigurator, CategoryTree
from asset_attributes.engine.core_attributes import CoreAttributeRegistry
from asset_attributes.engine.inheritance import InheritanceResolver
from asset_attributes.engine.library import AttributeLibrary
from asset_attributes.engine.manufacturers import ManufacturerRegistry
from asset_attributes.engine.preferences import PreferenceStore
from asset_attributes.engine.state import StoreState

class AttributeStore:
    def __init__(
        self,
        seed: Optional[Dict[str, Any]] = None,
        preferences: Optional[PreferenceStore] = None,
    ):
        self._seed = StoreState.model_validate(copy.deepcopy(seed if seed is not None else SEED_DATA))
        self._state = self._seed.model_copy(deep=True)
        self.preferences = preferences
        # used when no preference store is configured; not persisted
        self._parent_inheritance = True

        self.library = AttributeLibrary(self)
        self.configurator = CategoryAttributeConfigurator(self)
        self.tree = CategoryTree(self)
        self.resolver = InheritanceResolver(self)
        self.manufacturers = ManufacturerRegistry(self)
        self.core_attributes = CoreAttributeRegistry(self)

    @property
    def state(self) -> StoreState:
        """The published state. Components read it; nobody mutates it in place."""
        return self._state

    def snapshot(self) -> StoreState:
        return self._state.model_copy(deep=True)

    def reset(self) -> None:
        self._state = self._seed.model_copy(deep=True)
        logger.info("Store reset to seed data")

    @contextmanager
    def transaction(self) -> Iterator[StoreState]:
        working = self._state.model_copy(deep=True)
        yield working
        self._state = working

    # Reads

    def list_attributes(self) -> List[Attribute]:
        return [a.model_copy(deep=True) for a in self._state.attributes]

    def get_attribute(self, attribute_id: str) -> Attribute:
        return self._state.require_attribute(attribute_id).model_copy(deep=True)

    def list_categories(self) -> List[Category]:
        return [c.model_copy(deep=True) for c in self._state.categories]

    def get_category(self, category_id: str) -> Category:
        return self._state.require_category(category_id).model_copy(deep=True)

    def list_manufacturers(self) -> List[Manufacturer]:
        return [m.model_copy(deep=True) for m in self._state.manufacturers]

    def get_manufacturer(self, manufacturer_id: str) -> Manufacturer:
        return self._state.require_manufacturer(manufacturer_id).model_copy(deep=True)

    def list_core_attributes(self) -> List[CoreAttribute]:
        return [a.model_copy(deep=True) for a in self._state.core_attributes]

    def get_core_attribute(self, attribute_id: str) -> CoreAttribute:
        return self._state.require_core_attribute(attribute_id).model_copy(deep=True)

    # Parent inheritance flag

    @property
    def enable_parent_inheritance(self) -> bool:
        if self.preferences is None:
            return self._parent_inheritance
        return self.preferences.get_parent_inheritance()

    def toggle_parent_inheritance(self) -> bool:
        if self.preferences is None:
            self._parent_inheritance = not self._parent_inheritance
            return self._parent_inheritance
        return self.preferences.toggle_parent_inheritance()
