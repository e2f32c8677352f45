"""
Unit Tests for Group Capabilities

Tests the RSA group implementation of the Group/InvertibleGroup interfaces.
"""

import pytest

from zkaccum.group import Group, InvertibleGroup, RSAGroup, ToyRSAGroup
from zkaccum.rsa_params import generate_demo_params


class TestRSAGroup:
    """Test RSA group arithmetic."""

    def test_interfaces(self, toy_group):
        assert isinstance(toy_group, Group)
        assert isinstance(toy_group, InvertibleGroup)

    def test_abstract_group_not_instantiable(self):
        with pytest.raises(TypeError):
            Group()

    def test_base_elem(self, toy_group):
        assert toy_group.base_elem() == 4

    def test_exp_and_op(self, toy_group):
        g = toy_group.base_elem()
        assert toy_group.exp(g, 0) == 1
        assert toy_group.exp(g, 3) == 64
        assert toy_group.op(toy_group.exp(g, 5), toy_group.exp(g, 7)) == toy_group.exp(g, 12)

    def test_exp_rejects_negative(self, toy_group):
        with pytest.raises(ValueError, match="non-negative"):
            toy_group.exp(toy_group.base_elem(), -1)

    def test_inv(self, toy_group):
        g = toy_group.base_elem()
        assert toy_group.op(g, toy_group.inv(g)) == 1

    def test_inv_not_invertible(self, toy_group):
        with pytest.raises(ValueError, match="not invertible"):
            toy_group.inv(2**31 - 1)

    def test_exp_signed(self, toy_group):
        g = toy_group.base_elem()
        assert toy_group.exp_signed(g, 9) == toy_group.exp(g, 9)
        assert toy_group.op(toy_group.exp_signed(g, -9), toy_group.exp(g, 9)) == 1
        assert toy_group.exp_signed(g, -9) == toy_group.inv(toy_group.exp(g, 9))

    def test_elem_of(self, toy_group):
        assert toy_group.elem_of(toy_group.modulus + 5) == 5
        assert toy_group.elem_of(2**20) == 2**20

    def test_elem_to_bytes_fixed_width(self, toy_group):
        width = (toy_group.modulus.bit_length() + 7) // 8
        assert len(toy_group.elem_to_bytes(1)) == width
        assert len(toy_group.elem_to_bytes(toy_group.modulus - 1)) == width

    def test_constructor_validation(self):
        with pytest.raises(ValueError):
            RSAGroup(1, 1)
        with pytest.raises(ValueError):
            RSAGroup(209, 0)
        with pytest.raises(ValueError):
            RSAGroup(209, 209)
        with pytest.raises(ValueError, match="coprime"):
            RSAGroup(209, 11)

    def test_equality(self):
        assert ToyRSAGroup() == ToyRSAGroup()
        assert RSAGroup(209, 4) != RSAGroup(209, 5)
        assert hash(RSAGroup(209, 4)) == hash(RSAGroup(209, 4))

    def test_from_params(self, demo_group):
        assert (demo_group.modulus, demo_group.generator) == generate_demo_params()
        assert "2048-bit" in repr(demo_group)
