from dataclasses import dataclass
from typing import Iterator

INDICES_SEMANTIC = "indices"


@dataclass(frozen=True)
class PrimitiveAccessor:
    mesh_index: int
    primitive_index: int
    semantic: str
    accessor_index: int


def iter_primitive_accessors(metadata: dict) -> Iterator[PrimitiveAccessor]:
    """
    Yields the accessors referenced by every mesh primitive: each vertex
    attribute (POSITION, NORMAL, TEXCOORD_0, ...) in declaration order,
    then the index accessor if the primitive has one.
    """

    meshes: list[dict] = metadata.get("meshes", [])

    for mesh_index, mesh in enumerate(meshes):
        primitive: dict
        for primitive_index, primitive in enumerate(mesh.get("primitives", [])):
            attributes: dict[str, int] = primitive.get("attributes", {})
            for semantic, accessor_index in attributes.items():
                yield PrimitiveAccessor(
                    mesh_index, primitive_index, semantic, accessor_index
                )

            indices = primitive.get("indices")
            if indices is not None:
                yield PrimitiveAccessor(
                    mesh_index, primitive_index, INDICES_SEMANTIC, indices
                )
