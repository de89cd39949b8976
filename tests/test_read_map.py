"""End-to-end decoding of synthetic maps."""

import io
import warnings

import numpy as np
import pytest

from mrcconvert import (
    DataMode,
    InvalidExtent,
    MrcFile,
    TruncatedInput,
    decode_map,
    read_map,
    read_map_header,
)
from mrcconvert.io import open_reader

from create_tiny_mrc import FOREIGN, build_map


class TestReadMap:
    """Header plus voxels from one stream."""

    @pytest.fixture
    def tiny_mrc_path(self, tmp_path):
        path = tmp_path / "tiny.mrc"
        path.write_bytes(build_map())
        return path

    def test_path_source(self, tiny_mrc_path):
        mrc = read_map(tiny_mrc_path)
        assert isinstance(mrc, MrcFile)
        assert mrc.header.extent == (2, 2, 1)
        assert mrc.header.byte_order_mismatch is False
        assert mrc.data.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_str_source(self, tiny_mrc_path):
        assert read_map(str(tiny_mrc_path)).data.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_bytes_and_file_like_sources(self):
        data = build_map()
        assert read_map(data).data.tolist() == [1.0, 2.0, 3.0, 4.0]
        assert read_map(io.BytesIO(data)).data.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_open_binary_file(self, tiny_mrc_path):
        with open(tiny_mrc_path, "rb") as fh:
            mrc = read_map(fh)
            assert not fh.closed
        assert mrc.data.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_swapped_matches_native(self):
        native = read_map(build_map())
        swapped = read_map(build_map(endian=FOREIGN))
        assert swapped.header.byte_order_mismatch is True
        assert swapped.data.tolist() == native.data.tolist()
        native.header.byte_order_mismatch = True
        assert swapped.header == native.header

    def test_extended_header_captured(self):
        ext = bytes(range(160))
        mrc = read_map(build_map(ext_header=ext))
        assert mrc.header.num_bytes_extended_header == 160
        assert mrc.header.extended_header == ext
        assert mrc.data.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_grid_shape(self):
        values = [float(i) for i in range(24)]
        mrc = read_map(build_map((4, 3, 2), values))
        grid = mrc.grid()
        assert grid.shape == (2, 3, 4)
        # column index varies fastest
        assert grid[0, 0, 1] == 1.0
        assert grid[0, 1, 0] == 4.0
        assert grid[1, 0, 0] == 12.0

    def test_crystallographic_flag_passed_through(self):
        mrc = read_map(build_map(skew=(1, (1.0,) * 9, (0.0, 0.0, 0.0))), crystallographic=True)
        assert mrc.header.is_crystallographic is True
        assert mrc.header.skew_matrix == (1.0,) * 9

    def test_non_float_mode_warns(self):
        with pytest.warns(UserWarning, match="not float32"):
            mrc = read_map(build_map(mode=1))
        assert mrc.header.data_mode is DataMode.INT16

    def test_unknown_mode_warns_once(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            mrc = read_map(build_map(mode=99))
        assert [str(w.message) for w in caught] == ["Unrecognized MRC data mode 99"]
        assert mrc.header.data_mode == 99

    def test_float_mode_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            read_map(build_map())

    def test_invalid_extent(self):
        with pytest.raises(InvalidExtent):
            read_map(build_map((2, 0, 1), ()))

    def test_decode_map_counts_bytes(self):
        data = build_map()
        with open_reader(data) as reader:
            mrc = decode_map(reader)
            assert reader.bytes_fetched >= len(data)
        assert isinstance(mrc.data, np.ndarray)


class TestTruncation:
    """Anything shorter than header + extended header + payload fails."""

    @pytest.mark.parametrize("cut", [1, 4, 15, 80, 100, 500, 1100])
    def test_short_stream(self, cut):
        data = build_map(ext_header=b"\x00" * 80)
        with pytest.raises(TruncatedInput):
            read_map(data[:len(data) - cut])

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.mrc"
        path.write_bytes(b"")
        with pytest.raises(TruncatedInput):
            read_map(path)


class TestReadMapHeader:

    def test_header_only(self):
        data = build_map()
        hdr = read_map_header(data[:1024])
        assert hdr.extent == (2, 2, 1)
        assert hdr.extended_header == b""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_map_header(tmp_path / "missing.mrc")
