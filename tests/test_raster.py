"""Tests for raster conversion and validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seamcarve.errors import InvalidInputError
from seamcarve.raster import as_raster, to_rows, raster_dims, check_carvable


class TestAsRaster:
    def test_from_rows(self):
        rows = [[(1, 2, 3), (4, 5, 6)],
                [(7, 8, 9), (10, 11, 12)],
                [(13, 14, 15), (16, 17, 18)]]
        raster = as_raster(rows)
        assert raster.shape == (3, 3, 2)
        assert raster.dtype == torch.uint8
        assert raster[:, 1, 0].tolist() == [7, 8, 9]
        assert to_rows(raster) == rows

    def test_from_numpy_hwc(self):
        array = np.zeros((4, 5, 3), dtype=np.uint8)
        array[2, 3] = (255, 128, 0)
        raster = as_raster(array)
        assert raster.shape == (3, 4, 5)
        assert raster[:, 2, 3].tolist() == [255, 128, 0]

    def test_tensor_passthrough(self):
        tensor = torch.randint(0, 256, (3, 4, 6), dtype=torch.uint8)
        assert torch.equal(as_raster(tensor), tensor)

    def test_integer_tensor_is_narrowed(self):
        tensor = torch.full((3, 2, 2), 200, dtype=torch.int64)
        assert as_raster(tensor).dtype == torch.uint8

    def test_ragged_rows(self):
        rows = [[(0, 0, 0)] * 4, [(0, 0, 0)] * 3]
        with pytest.raises(InvalidInputError, match="Row 1"):
            as_raster(rows)

    def test_wrong_channel_count(self):
        with pytest.raises(InvalidInputError):
            as_raster([[(0, 0)]])
        with pytest.raises(InvalidInputError):
            as_raster(torch.zeros(4, 2, 2, dtype=torch.uint8))
        with pytest.raises(InvalidInputError):
            as_raster(np.zeros((2, 2), dtype=np.uint8))

    def test_out_of_range_values(self):
        with pytest.raises(InvalidInputError):
            as_raster([[(0, 0, 256)]])
        with pytest.raises(InvalidInputError):
            as_raster(torch.rand(3, 2, 2))

    def test_pixels_not_triples(self):
        with pytest.raises(InvalidInputError, match=r"not an \(R, G, B\) triple"):
            as_raster([[1, 2, 3], [4, 5, 6]])

    def test_rows_not_sequences(self):
        with pytest.raises(InvalidInputError):
            as_raster([1, 2, 3])
        with pytest.raises(InvalidInputError):
            as_raster(5)

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            as_raster([])


class TestDims:
    def test_width_then_height(self):
        assert raster_dims(torch.zeros(3, 7, 11)) == (11, 7)

    def test_check_carvable(self):
        check_carvable(torch.zeros(3, 2, 3))
        with pytest.raises(InvalidInputError):
            check_carvable(torch.zeros(3, 1, 3))
        with pytest.raises(InvalidInputError):
            check_carvable(torch.zeros(3, 2, 2))
