"""Unit tests for permission bit decoding."""

from dirmeta.attributes.permissions import Permissions


def test_permissions_from_regular_mode():
    perms = Permissions.from_mode(0o100644)
    assert perms.user_read and perms.user_write and not perms.user_execute
    assert perms.group_read and not perms.group_write and not perms.group_execute
    assert perms.other_read and not perms.other_write and not perms.other_execute
    assert not (perms.sticky or perms.setgid or perms.setuid)
    assert not perms.is_executable()


def test_permissions_special_bits():
    perms = Permissions.from_mode(0o7000)
    assert perms.setuid
    assert perms.setgid
    assert perms.sticky
    assert not perms.user_read


def test_permissions_any_execute_bit_makes_executable():
    assert Permissions.from_mode(0o100).is_executable()
    assert Permissions.from_mode(0o010).is_executable()
    assert Permissions.from_mode(0o001).is_executable()
    assert not Permissions.from_mode(0o666).is_executable()


def test_permissions_default_is_empty():
    assert Permissions() == Permissions.from_mode(0)
