from loguru import logger
from asset_attributes.core.errors import NotFoundError, ReferentialGuardError
from asset_attributes.schemas.manufacturer import Manufacturer, Model
from asset_attributes.engine.state import new_id, require_name

class ManufacturerRegistry:
    """
    Manufacturers and the models they own.

    used_by_categories is reference data from the seed; it is never
    derived from category bindings, only consulted by the delete guard
    and cleaned up when a category is deleted.
    """

    def __init__(self, store):
        self.store = store

    def add_manufacturer(self, name: str) -> str:
        name = require_name(name)
        with self.store.transaction() as state:
            manufacturer = Manufacturer(
                id=new_id("manufacturer", (m.id for m in state.manufacturers)),
                name=name,
                models=[],
                used_by_categories=[],
            )
            state.manufacturers.append(manufacturer)

        logger.info(f"Manufacturer {manufacturer.id} '{name}' added")
        return manufacturer.id

    def edit_manufacturer(self, manufacturer_id: str, name: str) -> None:
        name = require_name(name)
        with self.store.transaction() as state:
            state.require_manufacturer(manufacturer_id).name = name

        logger.info(f"Manufacturer {manufacturer_id} renamed to '{name}'")

    def delete_manufacturer(self, manufacturer_id: str) -> None:
        with self.store.transaction() as state:
            manufacturer = state.require_manufacturer(manufacturer_id)
            if manufacturer.used_by_categories:
                logger.warning(
                    f"Refused to delete manufacturer {manufacturer_id}: "
                    f"used by {manufacturer.used_by_categories}"
                )
                raise ReferentialGuardError(
                    f"Manufacturer {manufacturer.name} is used by categories: "
                    f"{', '.join(manufacturer.used_by_categories)}"
                )
            # models go with their owner
            state.manufacturers = [m for m in state.manufacturers if m.id != manufacturer_id]

        logger.info(f"Manufacturer {manufacturer_id} deleted with {len(manufacturer.models)} models")

    def add_model(self, manufacturer_id: str, name: str) -> str:
        name = require_name(name)
        with self.store.transaction() as state:
            manufacturer = state.require_manufacturer(manufacturer_id)
            model = Model(id=new_id("model", (m.id for m in manufacturer.models)), name=name)
            manufacturer.models.append(model)

        logger.info(f"Model {model.id} '{name}' added to manufacturer {manufacturer_id}")
        return model.id

    def edit_model(self, manufacturer_id: str, model_id: str, name: str) -> None:
        name = require_name(name)
        with self.store.transaction() as state:
            manufacturer = state.require_manufacturer(manufacturer_id)
            model = next((m for m in manufacturer.models if m.id == model_id), None)
            if model is None:
                raise NotFoundError("model", model_id)
            model.name = name

        logger.info(f"Model {model_id} of {manufacturer_id} renamed to '{name}'")

    def delete_model(self, manufacturer_id: str, model_id: str) -> None:
        with self.store.transaction() as state:
            manufacturer = state.require_manufacturer(manufacturer_id)
            if not any(m.id == model_id for m in manufacturer.models):
                raise NotFoundError("model", model_id)
            manufacturer.models = [m for m in manufacturer.models if m.id != model_id]

        logger.info(f"Model {model_id} deleted from manufacturer {manufacturer_id}")
