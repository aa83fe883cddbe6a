"""
Unit tests for eyeprefs/core/metadata.py and eyeprefs/core/i18n.py.
"""
import os
import json

from eyeprefs.constants import VERSION
from eyeprefs.core import i18n
from eyeprefs.core.metadata import DEFAULT_METADATA, load_metadata


class TestLoadMetadata:
    """Tests for metadata.json loading."""

    def test_no_path_gives_defaults(self):
        assert load_metadata(None) == DEFAULT_METADATA

    def test_missing_file_gives_defaults(self, temp_config_dir):
        metadata = load_metadata(temp_config_dir)
        assert metadata['name'] == 'Eye on Cursor'
        assert metadata['version'] == VERSION

    def test_file_overrides_defaults(self, temp_config_dir, sample_metadata):
        with open(os.path.join(temp_config_dir, 'metadata.json'), 'w', encoding='utf-8') as f:
            json.dump(sample_metadata, f)

        metadata = load_metadata(temp_config_dir)

        assert metadata['version'] == '7'
        assert metadata['shell-version'] == ['46', '47']
        # Fields absent from the file keep their defaults
        assert metadata['license'] == DEFAULT_METADATA['license']

    def test_corrupt_file_gives_defaults(self, temp_config_dir):
        with open(os.path.join(temp_config_dir, 'metadata.json'), 'w', encoding='utf-8') as f:
            f.write("{broken")

        assert load_metadata(temp_config_dir) == DEFAULT_METADATA

    def test_defaults_not_mutated(self, temp_config_dir, sample_metadata):
        with open(os.path.join(temp_config_dir, 'metadata.json'), 'w', encoding='utf-8') as f:
            json.dump(sample_metadata, f)

        load_metadata(temp_config_dir)

        assert DEFAULT_METADATA['version'] == VERSION


class TestTranslations:
    """Tests for the gettext wrapper."""

    def test_untranslated_without_catalog(self, temp_config_dir):
        i18n.setup_translations(temp_config_dir, languages=['fr'])
        assert i18n._('Eye Placement') == 'Eye Placement'
        assert i18n._('translator_credits') == 'translator_credits'

    def test_n_marks_without_translating(self):
        assert i18n.N_('Shape') == 'Shape'
