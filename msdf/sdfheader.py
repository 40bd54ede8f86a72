"""The SDF file header."""

from dataclasses import dataclass
from typing import BinaryIO

from .binaryio import read_string, read_value

CODE_NAME_LENGTH = 32


@dataclass(frozen=True)
class FileHeader:
    """Information stored at the start of an SDF file."""

    endianness: int
    version_major: int
    version_minor: int
    code_name: str
    first_block_location: int
    summary_location: int
    summary_size: int
    num_blocks: int
    block_header_length: int
    step: int
    time: float
    jobid1: int
    jobid2: int
    string_length: int
    code_io_version: int
    restart_flag: int
    subdomain_file: int


def read_file_header(stream: BinaryIO) -> FileHeader:
    """Read the file header from the current position of a binary stream."""
    marker = stream.read(4)
    if len(marker) < 4:
        raise EOFError("file too short for an SDF header")
    endianness = read_value(stream, "i")
    version_major = read_value(stream, "i")
    version_minor = read_value(stream, "i")
    code_name = read_string(stream, CODE_NAME_LENGTH)
    first_block_location = read_value(stream, "q")
    summary_location = read_value(stream, "q")
    summary_size = read_value(stream, "i")
    num_blocks = read_value(stream, "i")
    block_header_length = read_value(stream, "i")
    step = read_value(stream, "i")
    time = read_value(stream, "d")
    jobid1 = read_value(stream, "i")
    jobid2 = read_value(stream, "i")
    string_length = read_value(stream, "i")
    code_io_version = read_value(stream, "i")
    restart_flag = read_value(stream, "b")
    subdomain_file = read_value(stream, "b")
    return FileHeader(
        endianness=endianness,
        version_major=version_major,
        version_minor=version_minor,
        code_name=code_name,
        first_block_location=first_block_location,
        summary_location=summary_location,
        summary_size=summary_size,
        num_blocks=num_blocks,
        block_header_length=block_header_length,
        step=step,
        time=time,
        jobid1=jobid1,
        jobid2=jobid2,
        string_length=string_length,
        code_io_version=code_io_version,
        restart_flag=restart_flag,
        subdomain_file=subdomain_file,
    )