from salix.config import DEFAULT_CONFIG, load_config


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config == DEFAULT_CONFIG
    assert config["output_dir"] == "dist"
    assert config["site_name"] == "Salix Ventures"
    assert config["summary_length"] == 200
    assert config["highlight"] is False

    # defaults are copied, not shared
    config["site_name"] = "Changed"
    assert DEFAULT_CONFIG["site_name"] == "Salix Ventures"


def test_load_config_overrides_and_bad_files(tmp_path):
    (tmp_path / "salix.yaml").write_text("highlight: true\nextra: 1\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config["highlight"] is True
    assert config["extra"] == 1
    assert config["output_dir"] == "dist"

    (tmp_path / "salix.yaml").write_text("- not a dict", encoding="utf-8")
    assert load_config(tmp_path) == DEFAULT_CONFIG

    (tmp_path / "salix.yaml").write_text("", encoding="utf-8")
    assert load_config(tmp_path) == DEFAULT_CONFIG
