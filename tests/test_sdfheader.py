import io
import struct

import pytest

from msdf.sdfheader import read_file_header


def _header_bytes(**overrides):
    fields = dict(
        endianness=16911887,
        version_major=1,
        version_minor=4,
        code_name=b"Epoch2d",
        first_block_location=112,
        summary_location=5000,
        summary_size=256,
        num_blocks=12,
        block_header_length=72,
        step=350,
        time=2.5e-13,
        jobid1=11,
        jobid2=22,
        string_length=64,
        code_io_version=1,
        restart_flag=0,
        subdomain_file=1,
    )
    fields.update(overrides)
    data = struct.pack(
        "<4siii32sqqiiiidiiiibb",
        b"SDF1",
        fields["endianness"],
        fields["version_major"],
        fields["version_minor"],
        fields["code_name"].ljust(32, b" "),
        fields["first_block_location"],
        fields["summary_location"],
        fields["summary_size"],
        fields["num_blocks"],
        fields["block_header_length"],
        fields["step"],
        fields["time"],
        fields["jobid1"],
        fields["jobid2"],
        fields["string_length"],
        fields["code_io_version"],
        fields["restart_flag"],
        fields["subdomain_file"],
    )
    return data, fields


def test_read_header_fields():
    data, fields = _header_bytes()
    header = read_file_header(io.BytesIO(data))
    assert header.endianness == fields["endianness"]
    assert header.version_major == fields["version_major"]
    assert header.version_minor == fields["version_minor"]
    assert header.code_name == "Epoch2d"
    assert header.first_block_location == fields["first_block_location"]
    assert header.summary_location == fields["summary_location"]
    assert header.summary_size == fields["summary_size"]
    assert header.num_blocks == fields["num_blocks"]
    assert header.block_header_length == fields["block_header_length"]
    assert header.step == fields["step"]
    assert header.time == fields["time"]
    assert header.jobid1 == fields["jobid1"]
    assert header.jobid2 == fields["jobid2"]
    assert header.string_length == fields["string_length"]
    assert header.code_io_version == fields["code_io_version"]
    assert header.restart_flag == fields["restart_flag"]
    assert header.subdomain_file == fields["subdomain_file"]


def test_read_header_consumes_whole_header():
    data, _ = _header_bytes()
    stream = io.BytesIO(data + b"trailing")
    read_file_header(stream)
    assert stream.tell() == len(data)
    assert stream.read() == b"trailing"


def test_large_block_location():
    data, fields = _header_bytes(first_block_location=1 << 40)
    header = read_file_header(io.BytesIO(data))
    assert header.first_block_location == fields["first_block_location"]


def test_header_is_immutable():
    data, fields = _header_bytes()
    header = read_file_header(io.BytesIO(data))
    with pytest.raises(AttributeError):
        header.num_blocks = 3
    assert header.num_blocks == fields["num_blocks"]


def test_truncated_header():
    data, _ = _header_bytes()
    with pytest.raises(EOFError):
        read_file_header(io.BytesIO(data[:50]))


def test_empty_stream():
    with pytest.raises(EOFError):
        read_file_header(io.BytesIO(b""))