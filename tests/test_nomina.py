"""
Tests for NameForge and Configuration
=====================================
Tests for the NameForge class, the app.yaml defaults and the settings
loader.
"""

import logging

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nomina import NameForge, Termination, build_chain, generate
from nomina.config import Config, get_config, parse_separator, parse_termination
from nomina.settings import get_setting, resolve_path, PROJECT_ROOT


class TestConfig:
    """Tests for configuration loading."""

    def test_get_config_defaults(self):
        """Test that app.yaml values are resolved."""
        cfg = get_config()
        assert cfg.order == 2
        assert cfg.marker == '^'
        assert cfg.max_length == 12
        assert cfg.termination is Termination.MARKER
        assert cfg.separator == ' '
        assert not cfg.has_corpus_file

    def test_get_setting_dotted_path(self):
        assert get_setting('chain.order') == 2
        assert get_setting('chain.missing', 'fallback') == 'fallback'

    def test_resolve_path_relative(self):
        assert resolve_path('nomina') == (PROJECT_ROOT / 'nomina').resolve()

    def test_resolve_path_none(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    @pytest.mark.parametrize("value, expected", [
        ('marker', Termination.MARKER),
        ('SILENT', Termination.SILENT),
        (Termination.SILENT, Termination.SILENT),
    ])
    def test_parse_termination(self, value, expected):
        assert parse_termination(value) is expected

    def test_parse_termination_unknown(self):
        with pytest.raises(ValueError, match="Unknown termination"):
            parse_termination('explode')

    def test_parse_separator(self):
        assert parse_separator('-') == '-'
        with pytest.raises(ValueError, match="non-empty"):
            parse_separator('')


class TestNameForge:
    """Tests for NameForge generation."""

    @pytest.fixture
    def forge(self):
        return NameForge(order=2, seed=42)

    def test_init_from_config(self, forge):
        """Test that the bundled corpus and app.yaml defaults are used."""
        assert forge.order == 2
        assert forge.max_length == 12
        assert 'Gianni' in forge.corpus
        assert forge.chain == build_chain(forge.corpus, order=2)

    def test_generate_count(self, forge):
        names = forge.generate(count=10)
        assert len(names) <= 10
        assert len(names) > 0

    def test_generated_names_unique_and_capitalized(self, forge):
        names = forge.generate(count=10)
        assert len({n.lower() for n in names}) == len(names)
        for name in names:
            assert name
            assert all(word[:1].isupper() for word in name.split(' ') if word)

    def test_generated_names_not_in_corpus(self, forge):
        corpus = {n.lower() for n in forge.corpus}
        assert not any(n.lower() in corpus for n in forge.generate(count=10))

    def test_seed_reproducibility(self):
        names1 = NameForge(order=3, seed=11).generate(count=5)
        names2 = NameForge(order=3, seed=11).generate(count=5)
        assert names1 == names2

    def test_capitalizes_each_word(self):
        forge = NameForge(corpus=['ab cd'], order=2, seed=0)
        assert forge.generate_one() == 'Ab Cd'

    def test_silent_termination(self):
        forge = NameForge(corpus=['ab cd'], order=2, seed=0,
                          termination=Termination.SILENT)
        assert forge.generate_one() == 'Ab'

    def test_exclude_corpus(self, caplog):
        """Test that a chain that only reproduces its corpus yields nothing."""
        forge = NameForge(corpus=['abc'], order=2, seed=0)
        with caplog.at_level(logging.WARNING, logger='nomina'):
            assert forge.generate(count=3) == []
        assert 'Generated 0/3 names' in caplog.text

    def test_include_corpus(self):
        forge = NameForge(corpus=['abc'], order=2, seed=0)
        assert forge.generate(count=3, exclude_corpus=False) == ['Abc']

    def test_empty_corpus(self):
        forge = NameForge(corpus=[], order=2, seed=0)
        assert forge.chain == {}
        assert forge.generate_one() == ''
        assert forge.generate(count=2) == []

    def test_end_marker_option(self):
        forge = NameForge(corpus=['ab'], order=2, end_marker=True)
        assert forge.chain['ab'] == ['^']

    def test_end_marker_keeps_multi_word_names(self):
        """Test that names ending on a learned marker keep every word."""
        forge = NameForge(corpus=['ab cd'], order=2, end_marker=True, seed=0)
        assert forge.generate_one() == 'Ab Cd'

    def test_end_marker_multi_word_corpus(self):
        corpus = ['Barkskin Listener', 'Gladewalker Dream', 'Mossheart Wanderer']
        forge = NameForge(corpus=corpus, order=3, max_length=40, seed=1,
                          end_marker=True)
        names = forge.generate(count=10, exclude_corpus=False)
        assert any(' ' in name for name in names)

    def test_termination_from_string(self):
        """Test that a termination name is resolved, not used raw."""
        forge = NameForge(corpus=['ab cd'], order=2, seed=0, termination='silent')
        assert forge.termination is Termination.SILENT
        assert forge.generate_one() == 'Ab'

    def test_termination_unknown_string(self):
        with pytest.raises(ValueError, match="Unknown termination"):
            NameForge(corpus=['ab cd'], order=2, termination='explode')

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError, match="separator"):
            NameForge(corpus=['ab cd'], cfg=Config(separator=''))

    def test_custom_config(self):
        """Test that an explicit Config replaces app.yaml values."""
        cfg = Config(order=1, max_length=4, separator='-')
        forge = NameForge(corpus=['ab-cdef'], cfg=cfg, seed=0)
        assert forge.order == 1
        assert forge.generate_one() == 'Ab'

    def test_corpus_file_from_config(self, tmp_path):
        path = tmp_path / 'names.txt'
        path.write_text("Gianni\nMarco\n", encoding='utf-8')
        forge = NameForge(cfg=Config(corpus_path=path), seed=0)
        assert forge.corpus == ['Gianni', 'Marco']

    @pytest.mark.parametrize("kwargs", [{'order': -1}, {'max_length': -3}])
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            NameForge(corpus=['abc'], **kwargs)

    def test_generate_function(self):
        names = generate(count=3, seed=1)
        assert len(names) <= 3
