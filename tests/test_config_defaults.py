from htmltext import DEFAULT_OPTIONS
from htmltext.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.preset == "default"
    assert cfg.io.encoding_in == "utf-8-sig"
    assert cfg.io.encoding_out == "utf-8"
    assert cfg.env.max_text_length == "HTMLTEXT_MAX_TEXT_LENGTH"
    assert cfg.resolve_options() is DEFAULT_OPTIONS
