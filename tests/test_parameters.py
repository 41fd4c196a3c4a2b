import pytest

from deploykit.enums.parameters import ParameterKey

KEY_VALUES = [value for value in range(1, 92) if value != 47]


def test_region_key_and_label():
    assert ParameterKey.REGION.key() == "18"
    assert str(ParameterKey.REGION) == "region"


def test_cloudfront_label():
    assert str(ParameterKey.CLOUDFRONT_ID) == "cloudfront"
    assert ParameterKey.CLOUDFRONT_ID.key() == "19"


def test_last_key():
    assert ParameterKey.DEBUG_OPENAI_CALLS_IN_AUTOMATION.key() == "91"
    assert str(ParameterKey.DEBUG_OPENAI_CALLS_IN_AUTOMATION) == "debug open ai calls in automation"


def test_mixed_case_labels_kept():
    assert str(ParameterKey(51)) == "ACM certificate Arn"
    assert str(ParameterKey(59)) == "Is the job of type preview"


def test_retired_key_is_absent():
    with pytest.raises(ValueError):
        ParameterKey(47)


def test_keys_are_unique():
    keys = [ParameterKey(value).key() for value in KEY_VALUES]
    assert len(keys) == len(set(keys)) == 90


@pytest.mark.parametrize("member", list(ParameterKey))
def test_key_round_trips_to_member(member):
    assert ParameterKey(int(member.key())) is member


@pytest.mark.parametrize("value", KEY_VALUES)
def test_every_member_has_label(value):
    label = str(ParameterKey(value))
    assert label.strip() == label
    assert len(label) > 0


def test_labels_are_unique():
    labels = [str(ParameterKey(value)) for value in KEY_VALUES]
    assert len(labels) == len(set(labels))