import pytest

from snapedit.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.initial_capacity == 10
    assert config.encoding == "utf-8"
    assert not config.snapshot_before_validation
    assert not config.split_compound_edits
    assert not config.cross_push_on_empty


def test_reference_enables_every_quirk() -> None:
    config = EditorConfig.reference(initial_capacity=4)

    assert config.initial_capacity == 4
    assert config.snapshot_before_validation
    assert config.split_compound_edits
    assert config.cross_push_on_empty


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "SNAPEDIT_INITIAL_CAPACITY": "32",
            "SNAPEDIT_ENCODING": "latin-1",
            "SNAPEDIT_SPLIT_COMPOUND_EDITS": "yes",
            "SNAPEDIT_CROSS_PUSH_ON_EMPTY": "0",
            "UNRELATED": "1",
        }
    )

    assert config.initial_capacity == 32
    assert config.encoding == "latin-1"
    assert config.split_compound_edits is True
    assert config.cross_push_on_empty is False
    assert config.snapshot_before_validation is False


def test_from_env_empty_mapping_gives_defaults() -> None:
    assert EditorConfig.from_env({}) == EditorConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"SNAPEDIT_INITIAL_CAPACITY": "ten"},
        {"SNAPEDIT_INITIAL_CAPACITY": "0"},
        {"SNAPEDIT_ENCODING": "no-such-codec"},
        {"SNAPEDIT_SNAPSHOT_BEFORE_VALIDATION": "maybe"},
    ],
)
def test_from_env_rejects_bad_values(environ: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig.from_env(environ)


def test_config_is_frozen() -> None:
    config = EditorConfig()

    with pytest.raises(AttributeError):
        config.initial_capacity = 3  # type: ignore[misc]
