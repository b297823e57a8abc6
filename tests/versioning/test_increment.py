"""
Tests for the increment engine.

All tests in this file are marked as 'short' since they don't require
external dependencies.
"""

import pytest

from tagversion.versioning import IncrementMode, increment_version
from tests.factories import make_config, make_record

BETA = make_config(suffix="beta")


def _numbers(derived):
    return (
        derived.major,
        derived.minor,
        derived.patch,
        derived.build,
        derived.suffix_number,
    )


@pytest.mark.short
class TestIncrementVersion:
    """Test increment_version over the increment modes."""

    def test_none_keeps_the_selected_tag(self):
        record = make_record("release-1.2.3.4-beta.5", make_config(
            prefix="v", prefix_pattern="v|release-", suffix="beta"
        ))

        derived = increment_version(record, IncrementMode.NONE, prefix="v", suffix="beta")

        assert derived.tag == "release-1.2.3.4-beta.5"
        assert derived.prefix == "release-"
        assert derived.suffix == "beta.5"
        assert _numbers(derived) == (1, 2, 3, 4, 5)
        assert derived.version == "1.2.3.4"
        assert derived.incremented is False
        assert derived.found is record

    def test_none_keeps_the_suffix_number_as_written(self):
        record = make_record("v1.0.0-beta.02", BETA)

        derived = increment_version(record, IncrementMode.NONE, prefix="v", suffix="beta")

        assert derived.suffix == "beta.02"
        assert derived.suffix_number == 2

    def test_major(self):
        record = make_record("v1.2.3.4-beta.2", BETA)

        derived = increment_version(record, IncrementMode.MAJOR, prefix="v", suffix="beta")

        assert _numbers(derived) == (2, 0, 0, 0, 2)
        assert derived.tag == "v2.0.0-beta"
        assert derived.version == "2.0.0.0"

    def test_minor(self):
        record = make_record("v1.2.3.4")

        derived = increment_version(record, IncrementMode.MINOR, prefix="v")

        assert _numbers(derived) == (1, 3, 0, 0, 0)
        assert derived.tag == "v1.3.0"

    def test_patch(self):
        record = make_record("v1.2.3")

        derived = increment_version(record, IncrementMode.PATCH, prefix="v")

        assert derived.tag == "v1.2.4"
        assert derived.version == "1.2.4.0"
        assert derived.version_short == "1.2.4"
        assert derived.incremented is True

    def test_build(self):
        record = make_record("v1.2.3.5")

        derived = increment_version(record, IncrementMode.BUILD, prefix="v")

        assert derived.tag == "v1.2.3.6"
        assert derived.version == "1.2.3.6"

    def test_build_with_static_build_number(self):
        record = make_record("v1.2.3.5")

        derived = increment_version(
            record, IncrementMode.BUILD, static_build_number=42, prefix="v"
        )

        assert derived.tag == "v1.2.3.42"
        assert derived.version == "1.2.3.42"

    def test_build_resets_suffix_number_and_keeps_plain_suffix(self):
        record = make_record("v1.2.3.5-beta.3", BETA)

        derived = increment_version(record, IncrementMode.BUILD, prefix="v", suffix="beta")

        assert _numbers(derived) == (1, 2, 3, 6, 0)
        assert derived.tag == "v1.2.3.6-beta"
        assert derived.suffix == "beta"

    def test_suffix(self):
        record = make_record("v1.0.0-beta.2", BETA)

        derived = increment_version(record, IncrementMode.SUFFIX, prefix="v", suffix="beta")

        assert derived.tag == "v1.0.0-beta.3"
        assert derived.version == "1.0.0.3"
        assert derived.suffix == "beta.3"
        assert _numbers(derived) == (1, 0, 0, 3, 3)

    def test_suffix_with_static_build_number(self):
        record = make_record("v1.0.0-beta.2", BETA)

        derived = increment_version(
            record, IncrementMode.SUFFIX, static_build_number=10, prefix="v", suffix="beta"
        )

        assert derived.tag == "v1.0.0-beta.10"
        assert derived.version == "1.0.0.10"

    def test_suffix_from_a_tag_without_suffix(self):
        record = make_record("v1.0.0", BETA)

        derived = increment_version(record, IncrementMode.SUFFIX, prefix="v", suffix="beta")

        assert derived.tag == "v1.0.0-beta.1"

    def test_suffix_without_configured_literal_omits_the_suffix(self):
        config = make_config(suffix_pattern="[a-z]*")
        record = make_record("v1.0.0-rc.4", config)

        derived = increment_version(record, IncrementMode.SUFFIX, prefix="v", suffix=None)

        assert derived.tag == "v1.0.0"
        assert derived.suffix == ""
        assert derived.version == "1.0.0.5"

    def test_incremented_tag_uses_configured_prefix(self):
        record = make_record(
            "release-1.0.0", make_config(prefix="v", prefix_pattern="v|release-")
        )

        derived = increment_version(record, IncrementMode.PATCH, prefix="v")

        assert derived.tag == "v1.0.1"
        assert derived.prefix == "v"

    def test_record_is_not_mutated(self):
        record = make_record("v1.2.3.4")

        increment_version(record, IncrementMode.MAJOR, prefix="v")

        assert (record.major, record.minor, record.patch, record.build) == (1, 2, 3, 4)

    @pytest.mark.parametrize(
        "mode", [IncrementMode.MAJOR, IncrementMode.MINOR, IncrementMode.PATCH]
    )
    def test_release_modes_reset_lower_components(self, mode):
        record = make_record("v3.4.5.6")

        derived = increment_version(record, mode, prefix="v")

        numbers = [derived.major, derived.minor, derived.patch, derived.build]
        bumped = {
            IncrementMode.MAJOR: 0,
            IncrementMode.MINOR: 1,
            IncrementMode.PATCH: 2,
        }[mode]
        assert all(n == 0 for n in numbers[bumped + 1 :])

    @pytest.mark.parametrize("mode", list(IncrementMode))
    def test_increment_is_deterministic(self, mode):
        record = make_record("v1.0.0.2-beta.3", BETA)

        first = increment_version(record, mode, static_build_number=None, prefix="v", suffix="beta")
        second = increment_version(record, mode, static_build_number=None, prefix="v", suffix="beta")

        assert first == second


@pytest.mark.short
def test_auto_increment_values():
    assert IncrementMode.auto_increment_values() == (
        "major",
        "minor",
        "patch",
        "build",
        "suffix",
    )
