"""Tests for hexcolour.core.codec — packing, unpacking, tints, shades, to_rgba."""

import numpy as np
import pytest
from hexcolour.core.codec import (
    compose_8bit_rgba,
    compose_normalized,
    decompose_rgb,
    decompose_rgba,
    encode_8bit,
    pack_array,
    shade_rgb,
    shade_rgba,
    tint_rgb,
    tint_rgba,
    to_rgba,
    unpack_array,
)
from hexcolour.core.types import Colour

EMERALD = 0x2ECC71FF


class TestDecomposeRgba:
    def test_channel_order(self):
        assert decompose_rgba(0xFF000000) == (1.0, 0.0, 0.0, 0.0)
        assert decompose_rgba(0x00FF0000) == (0.0, 1.0, 0.0, 0.0)
        assert decompose_rgba(0x0000FF00) == (0.0, 0.0, 1.0, 0.0)
        assert decompose_rgba(0x000000FF) == (0.0, 0.0, 0.0, 1.0)

    def test_emerald(self):
        assert decompose_rgba(EMERALD) == (46 / 255, 204 / 255, 113 / 255, 1.0)

    def test_above_32_bits_clamps(self):
        assert decompose_rgba(0x1_00000000) == decompose_rgba(0xFFFFFFFF)
        assert decompose_rgba(2**40) == (1.0, 1.0, 1.0, 1.0)

    def test_zero(self):
        assert decompose_rgba(0) == (0.0, 0.0, 0.0, 0.0)


class TestDecomposeRgb:
    def test_matches_rgba_with_opaque_alpha(self):
        assert decompose_rgb(0x2ECC71) == decompose_rgba(0x2ECC71FF)

    def test_alpha_is_one(self):
        assert decompose_rgb(0x000000)[3] == 1.0

    def test_white(self):
        assert decompose_rgb(0xFFFFFF) == (1.0, 1.0, 1.0, 1.0)


class TestCompose8bitRgba:
    def test_emerald(self):
        assert compose_8bit_rgba(46, 204, 113, 1.0) == EMERALD

    def test_alpha_defaults_to_opaque(self):
        assert compose_8bit_rgba(46, 204, 113) == EMERALD

    def test_half_alpha_rounds(self):
        # 0.5 * 255 = 127.5
        assert compose_8bit_rgba(0, 0, 0, 0.5) & 0xFF == 128

    @pytest.mark.parametrize('half, expected', [(2.5, 3), (4.5, 5), (126.5, 127), (254.5, 255)])
    def test_alpha_halves_round_up(self, half, expected):
        assert compose_8bit_rgba(0, 0, 0, half / 255) & 0xFF == expected

    def test_alpha_below_half_rounds_down(self):
        assert compose_8bit_rgba(0, 0, 0, 2.4 / 255) & 0xFF == 2

    def test_channels_clamp_to_255(self):
        assert compose_8bit_rgba(300, 0, 0, 1.0) == 0xFF0000FF
        assert compose_8bit_rgba(1000, 1000, 1000) == 0xFFFFFFFF

    def test_alpha_clamps(self):
        assert compose_8bit_rgba(0, 0, 0, 2.0) == 0x000000FF
        assert compose_8bit_rgba(0, 0, 0, -1.0) == 0x00000000

    def test_negative_channels_clamp_to_zero(self):
        assert compose_8bit_rgba(300, -5, 0, 2.0) == 0xFF0000FF

    def test_round_trip_every_red_and_alpha(self):
        for v in range(256):
            packed = compose_8bit_rgba(v, 255 - v, v // 2, v / 255.0)
            assert decompose_rgba(packed) == (v / 255, (255 - v) / 255, (v // 2) / 255, v / 255)

    def test_round_trip_packed(self):
        for packed in (0x00000000, 0x12345678, 0x2ECC71FF, 0xDEADBEEF, 0xFFFFFFFF):
            r, g, b, a = decompose_rgba(packed)
            assert compose_normalized((r, g, b, a)) == packed


class TestEncode8bit:
    def test_normalizes(self):
        assert encode_8bit(255, 0, 51, 0.5) == (1.0, 0.0, 0.2, 0.5)

    def test_clamps(self):
        assert encode_8bit(999, -1, 0, 3.0) == (1.0, 0.0, 0.0, 1.0)

    def test_alpha_defaults_to_opaque(self):
        assert encode_8bit(46, 204, 113)[3] == 1.0

    def test_matches_decompose(self):
        assert encode_8bit(46, 204, 113, 1.0) == decompose_rgba(EMERALD)


class TestTint:
    @pytest.mark.parametrize('amount', [0.05, 0.2, 0.5, 1.0])
    def test_channels_never_decrease(self, amount):
        base = decompose_rgba(0x2ECC7180)
        tinted = tint_rgba(0x2ECC7180, amount)
        for before, after in zip(base[:3], tinted[:3]):
            assert after >= before
            assert after <= 1.0
        assert tinted[3] == base[3]

    def test_adds_amount(self):
        r, g, b, a = tint_rgba(0x00000080, 0.25)
        assert (r, g, b) == (0.25, 0.25, 0.25)
        assert a == 128 / 255

    def test_caps_at_one(self):
        assert tint_rgba(0xF0F0F0FF, 0.5) == (1.0, 1.0, 1.0, 1.0)

    def test_full_amount_is_white(self):
        for packed in (0x00000000, EMERALD, 0x7F7F7F7F):
            assert tint_rgba(packed, 1.0)[:3] == (1.0, 1.0, 1.0)

    def test_amount_clamps(self):
        assert tint_rgba(EMERALD, 5.0) == tint_rgba(EMERALD, 1.0)
        assert tint_rgba(EMERALD, -1.0) == decompose_rgba(EMERALD)

    def test_rgb_variant(self):
        assert tint_rgb(0x2ECC71, 0.3) == tint_rgba(EMERALD, 0.3)


class TestShade:
    @pytest.mark.parametrize('amount', [0.05, 0.2, 0.5, 1.0])
    def test_channels_never_increase(self, amount):
        base = decompose_rgba(0x2ECC7180)
        shaded = shade_rgba(0x2ECC7180, amount)
        for before, after in zip(base[:3], shaded[:3]):
            assert after <= before
            assert after >= 0.0
        assert shaded[3] == base[3]

    def test_floors_at_zero(self):
        assert shade_rgba(0x101010FF, 0.5) == (0.0, 0.0, 0.0, 1.0)

    def test_full_amount_is_black(self):
        for packed in (0xFFFFFFFF, EMERALD, 0x7F7F7F7F):
            assert shade_rgba(packed, 1.0)[:3] == (0.0, 0.0, 0.0)

    def test_amount_clamps(self):
        assert shade_rgba(EMERALD, 2.0) == shade_rgba(EMERALD, 1.0)
        assert shade_rgba(EMERALD, -0.5) == decompose_rgba(EMERALD)

    def test_rgb_variant(self):
        assert shade_rgb(0x2ECC71, 0.3) == shade_rgba(EMERALD, 0.3)


class TestToRgba:
    def test_rgb(self):
        assert to_rgba(Colour('rgb', (1.0, 0.0, 0.5, 1.0))) == 0xFF007FFF

    def test_rgb_from_decompose(self):
        assert to_rgba(Colour.from_rgba(decompose_rgba(EMERALD))) == EMERALD

    def test_channels_truncate(self):
        assert to_rgba(Colour('rgb', (0.999, 0.004, 0.5, 1.0))) == 0xFE017FFF

    def test_monochrome_broadcasts_gray(self):
        assert to_rgba(Colour('monochrome', (0.5, 1.0))) == 0x7F7F7FFF

    def test_monochrome_alpha(self):
        assert to_rgba(Colour('monochrome', (1.0, 0.0))) == 0xFFFFFF00

    @pytest.mark.parametrize('model', ['cmyk', 'lab', 'hsv', 'ycbcr', 'pattern'])
    def test_other_models_are_absent(self, model):
        assert to_rgba(Colour(model, (0.1, 0.2, 0.3, 0.4))) is None


class TestArrays:
    def test_unpack_matches_scalar(self):
        values = [0x00000000, 0x2ECC71FF, 0xDEADBEEF, 0xFFFFFFFF]
        unpacked = unpack_array(np.array(values))
        assert unpacked.dtype == np.uint8
        assert unpacked.shape == (4, 4)
        for packed, row in zip(values, unpacked):
            assert tuple(int(v) / 255 for v in row) == decompose_rgba(packed)

    def test_unpack_clamps_above_32_bits(self):
        unpacked = unpack_array(np.array([0x1_00000000], dtype=np.int64))
        assert unpacked.tolist() == [[255, 255, 255, 255]]

    def test_pack_rgba(self):
        packed = pack_array(np.array([[46, 204, 113, 255], [0, 0, 0, 0]], dtype=np.uint8))
        assert packed.dtype == np.uint32
        assert packed.tolist() == [EMERALD, 0]

    def test_pack_rgb_is_opaque(self):
        assert pack_array(np.array([46, 204, 113])).tolist() == EMERALD

    def test_pack_clips(self):
        assert pack_array(np.array([300, -5, 0, 999])).tolist() == 0xFF0000FF

    def test_pack_rejects_bad_channel_count(self):
        with pytest.raises(ValueError):
            pack_array(np.zeros((2, 5)))

    def test_round_trip_image_shape(self):
        rng = np.random.default_rng(42)
        pixels = rng.integers(0, 256, size=(6, 7, 4), dtype=np.uint8)
        assert np.array_equal(unpack_array(pack_array(pixels)), pixels)
