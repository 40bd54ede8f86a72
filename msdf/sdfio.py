"""SDF block, data and geometry type codes."""

from enum import Enum


class BlockType(Enum):
    """Types of SDF data blocks; the value is the human readable name."""

    SCRUBBED = "scrubbed"
    NULL = "null"
    PLAIN_MESH = "plain_mesh"
    POINT_MESH = "point_mesh"
    PLAIN_VARIABLE = "plain_variable"
    POINT_VARIABLE = "point_variable"
    CONSTANT = "constant"
    ARRAY = "array"
    RUN_INFO = "run_info"
    SOURCE = "source"
    STITCHED_TENSOR = "stitched_tensor"
    STITCHED_MATERIAL = "stitched_material"
    STITCHED_MATVAR = "stitched_matvar"
    STITCHED_SPECIES = "stitched_species"
    PARTICLE_SPECIES = "particle_species"
    PLAIN_DERIVED = "plain_derived"
    POINT_DERIVED = "point_derived"
    CONTIGUOUS_TENSOR = "contiguous_tensor"
    CONTIGUOUS_MATERIAL = "contiguous_material"
    CONTIGUOUS_MATVAR = "contiguous_matvar"
    CONTIGUOUS_SPECIES = "contiguous_species"
    CPU_SPLIT = "cpu_split"
    STITCHED_OBSTACLE_GROUP = "stitched_obstacle_group"
    UNSTRUCTURED_MESH = "unstructured_mesh"
    STITCHED = "stitched"
    CONTIGUOUS = "contiguous"
    LAGRANGIAN_MESH = "lagrangian_mesh"
    STATION = "station"
    STATION_DERIVED = "station_derived"
    DATABLOCK = "datablock"
    NAMEVALUE = "namevalue"
    OTHER = "other"


class DataType(Enum):
    """Types of data held in SDF blocks; the value is the human readable name."""

    NULL = "null"
    INTEGER4 = "integer4"
    INTEGER8 = "integer8"
    REAL4 = "real4"
    REAL8 = "real8"
    REAL16 = "real16"
    CHARACTER = "character"
    LOGICAL = "logical"
    OTHER = "other"


class GeometryType(Enum):
    """Mesh geometries."""

    NULL = 0
    CARTESIAN = 1
    CYLINDRICAL = 2
    SPHERICAL = 3


# Block types in file-code order, starting at code -1.
_BLOCK_TYPES_BY_CODE = {
    code: block_type
    for code, block_type in enumerate(
        [bt for bt in BlockType if bt is not BlockType.OTHER], start=-1
    )
}

# Data types in file-code order, starting at code 0.
_DATA_TYPES_BY_CODE = {
    code: data_type
    for code, data_type in enumerate(
        [dt for dt in DataType if dt is not DataType.OTHER]
    )
}


def block_type_from_int(code: int) -> BlockType:
    """Map an integer block type code from a file to a BlockType."""
    return _BLOCK_TYPES_BY_CODE.get(code, BlockType.OTHER)


def data_type_from_int(code: int) -> DataType:
    """Map an integer data type code from a file to a DataType."""
    return _DATA_TYPES_BY_CODE.get(code, DataType.OTHER)


def block_type_name(block_type: BlockType) -> str:
    """Return the human readable name of a block type."""
    return block_type.value


def data_type_name(data_type: DataType) -> str:
    """Return the human readable name of a data type."""
    return data_type.value