import argparse
import logging
import sys
from pathlib import Path

from glb_reader.accessors import (
    INDICES_SEMANTIC,
    PrimitiveAccessor,
    compute_bounds,
    compute_mean,
    iter_primitive_accessors,
    uv_coverage,
    uv_distribution,
)
from glb_reader.gltf import GlbContainer
from glb_reader.gltf.exceptions import GlbException

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONTAINER_ERROR = 1
EXIT_ACCESSOR_ERROR = 2


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")

    return number


def _format_vector(values: list[float], precision: int = 6) -> str:
    return "[" + ", ".join(f"{value:.{precision}f}" for value in values) + "]"


def _print_header(container: GlbContainer) -> None:
    metadata = container.metadata

    print("GLB Header:")
    print(f"  Version: {container.format_version}")
    print(f"  Length: {container.total_byte_length} bytes")
    print(f"  Binary buffer: {len(container.binary_buffer)} bytes")
    print()

    for key in ("meshes", "materials", "textures", "accessors", "bufferViews"):
        print(f"{key}: {len(metadata.get(key, []))}")
    print()


def _print_accessor(
    container: GlbContainer,
    primitive_accessor: PrimitiveAccessor,
    elements: list,
    samples: int,
) -> None:
    accessor = container.metadata["accessors"][primitive_accessor.accessor_index]
    semantic = primitive_accessor.semantic

    print(
        f"    {semantic} (accessor {primitive_accessor.accessor_index}): "
        f"{accessor['type']} x {len(elements)}"
    )

    if semantic == INDICES_SEMANTIC:
        print(f"      Triangles: {len(elements) // 3}")

    if elements:
        bounds = compute_bounds(elements)
        print(f"      Min: {_format_vector(bounds.min)}")
        print(f"      Max: {_format_vector(bounds.max)}")
        print(f"      Size: {_format_vector(bounds.size)}")

        if semantic.startswith("TEXCOORD_") and len(bounds.min) >= 2:
            print(f"      Center: {_format_vector(bounds.center)}")
            print(f"      Average: {_format_vector(compute_mean(elements))}")
            print(f"      Coverage: {uv_coverage(bounds) * 100:.2f}% of texture")

            distribution = uv_distribution(elements)
            print(f"      U distribution: {distribution['u']}")
            print(f"      V distribution: {distribution['v']}")

    for index, element in enumerate(elements[:samples]):
        print(f"      [{index}]: {element}")


def inspect_file(path: Path, *, lenient: bool = False, samples: int = 0) -> int:
    try:
        container = GlbContainer.parse(path)
    except (GlbException, OSError) as exception:
        logger.error(f"Cannot read {path}: {exception}")
        return EXIT_CONTAINER_ERROR

    print(f"GLB file: {path}")
    _print_header(container)

    failed_accessors = 0
    current_primitive = None
    for primitive_accessor in iter_primitive_accessors(container.metadata):
        primitive_key = (
            primitive_accessor.mesh_index,
            primitive_accessor.primitive_index,
        )
        if primitive_key != current_primitive:
            current_primitive = primitive_key
            print(f"Mesh {primitive_key[0]}, primitive {primitive_key[1]}:")

        try:
            elements = container.decode_accessor(
                primitive_accessor.accessor_index, lenient=lenient
            )
        except GlbException as exception:
            logger.error(
                f"Skipping {primitive_accessor.semantic} of mesh "
                f"{primitive_accessor.mesh_index} primitive "
                f"{primitive_accessor.primitive_index}: {exception}"
            )
            failed_accessors += 1
            continue

        _print_accessor(container, primitive_accessor, elements, samples)

    if failed_accessors:
        logger.error(f"{failed_accessors} accessor(s) could not be decoded")
        return EXIT_ACCESSOR_ERROR

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="glb-inspect",
        description="Decode and summarize the mesh accessors of a GLB file",
    )
    parser.add_argument("path", type=Path, help="Input GLB file")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Decode unknown component types as zeros instead of failing",
    )
    parser.add_argument(
        "--samples",
        type=_non_negative_int,
        default=0,
        help="Number of decoded elements to print per accessor",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    return inspect_file(args.path, lenient=args.lenient, samples=args.samples)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
