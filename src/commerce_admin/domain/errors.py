# src/commerce_admin/domain/errors.py


class EntityNotFoundError(Exception):
    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} '{entity_id}' not found")
        self.entity = entity
        self.entity_id = entity_id
