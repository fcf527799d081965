"""Tests for champion adaptation and unit loading."""

import json

import pytest

from teambuilder.core.ability_formatter import format_ability_description
from teambuilder.core.champion_adapter import adapt_champion, adapt_stats
from teambuilder.data.loaders import (
    LoadUnitsConfig,
    UnitsLoader,
    UnitsLoadError,
    read_set_file,
    sort_units_by_cost_and_name,
)
from teambuilder.data.models import SetChampion, SetStats, Unit

AHRI = {
    "name": "Ahri",
    "apiName": "TFT16_Ahri",
    "cost": 4,
    "traits": ["Ionia", "Black Rose"],
    "ability": {
        "description": "Deals @MagicDamage@ magic damage (@MagicDamage.scaling@)",
        "spellKey": "AhriOrb",
        "variables": {"MagicDamage": {"values": [100, 150, 200], "scaling": "AP"}},
    },
}


def write_set_file(path, champions) -> str:
    path.write_text(json.dumps({"champions": champions}), encoding="utf-8")
    return str(path)


class TestAdaptChampion:
    """adapt_champion tests."""

    def test_skipped_without_any_image(self):
        champion = SetChampion.model_validate(AHRI)
        assert adapt_champion(champion, {}, {}, {}) is None

    def test_end_to_end_with_local_image(self):
        champion = SetChampion.model_validate(AHRI)
        unit = adapt_champion(champion, {}, {"ahri": "static/units/Ahri.jpg"}, {})

        assert unit is not None
        assert unit.url == "static/units/Ahri.jpg"
        # Structured variables: the description is not rewritten to {MagicDamage}.
        assert "@MagicDamage@" in unit.ability.description
        assert "{MagicDamage}" not in unit.ability.description

        html = format_ability_description(unit.ability)
        assert '<span class="ability-token">100/150/200</span>' in html
        assert 'class="ability-scaling-group"' in html
        assert "ability-icon-ap" in html
        group_start = html.index("ability-scaling-group")
        assert html.index("ability-icon-ap") > group_start

    def test_image_found_by_api_name(self):
        champion = SetChampion.model_validate(AHRI)
        unit = adapt_champion(champion, {}, {"tft16ahri": "static/units/TFT16_Ahri.jpg"}, {})
        assert unit.url == "static/units/TFT16_Ahri.jpg"

    def test_portrait_fallback(self):
        champion = SetChampion.model_validate({**AHRI, "icons": {"portrait": "https://cdn/ahri.png"}})
        unit = adapt_champion(champion, {}, {}, {})
        assert unit.url == "https://cdn/ahri.png"

    def test_traits_and_spell_icon(self):
        champion = SetChampion.model_validate(AHRI)
        unit = adapt_champion(
            champion,
            {"black-rose": "static/traits/black-rose.svg"},
            {"ahri": "static/units/Ahri.jpg"},
            {"ahriorb": "static/spells/AhriOrb.webp"},
        )
        assert [t.name for t in unit.traits] == ["Ionia", "Black Rose"]
        assert unit.traits[0].icon == ""
        assert unit.traits[1].icon == "static/traits/black-rose.svg"
        assert unit.ability.icon == "static/spells/AhriOrb.webp"

    def test_spell_icon_prefers_unit_name(self):
        champion = SetChampion.model_validate(AHRI)
        unit = adapt_champion(
            champion,
            {},
            {"ahri": "u.jpg"},
            {"ahri": "by-name.webp", "ahriorb": "by-key.webp"},
        )
        assert unit.ability.icon == "by-name.webp"


class TestAdaptStats:
    """adapt_stats tests."""

    def test_rounding(self):
        stats = SetStats.model_validate(
            {
                "hp": [650, "1170", 2106.5],
                "damage": [45, 67.5, 101.25],
                "armor": 44.5,
                "magicResist": 40,
                "mana": 80,
                "initialMana": 30,
                "range": 1,
                "attackSpeed": 0.7,
                "critChance": 0.25,
                "critMultiplier": 1.4,
            }
        )
        result = adapt_stats(stats)
        assert result.hp == [650, 1170, 2107]
        assert result.damage == [45, 68, 101]
        assert result.armor == 45
        assert result.magic_resist == 40
        assert result.mana == 80
        assert result.initial_mana == 30
        assert result.attack_speed == 0.7
        assert result.ability_power == 100

    def test_empty_stats(self):
        result = adapt_stats(SetStats())
        assert result.hp == []
        assert result.armor == 0


class TestSortUnits:
    """sort_units_by_cost_and_name tests."""

    def test_sorted_by_cost_then_name(self):
        units = [
            Unit(name="Zoe", cost=3, url="z"),
            Unit(name="Ahri", cost=1, url="a"),
            Unit(name="Jinx", cost=3, url="j"),
            Unit(name="Brand", cost=1, url="b"),
            Unit(name="Lux", cost=5, url="l"),
        ]
        sort_units_by_cost_and_name(units)
        assert [(u.name, u.cost) for u in units] == [
            ("Ahri", 1), ("Brand", 1), ("Jinx", 3), ("Zoe", 3), ("Lux", 5),
        ]

    def test_empty(self):
        units = []
        sort_units_by_cost_and_name(units)
        assert units == []


class TestReadSetFile:
    """read_set_file tests."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(UnitsLoadError, match="read"):
            read_set_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text("not valid json {{{", encoding="utf-8")
        with pytest.raises(UnitsLoadError, match="decode"):
            read_set_file(path)

    def test_unsupported_value_shape(self, tmp_path):
        path = write_set_file(tmp_path / "bad.json", [{"name": "A", "stats": {"hp": True}}])
        with pytest.raises(UnitsLoadError, match="decode"):
            read_set_file(path)

    def test_number_too_large_for_float(self, tmp_path):
        path = tmp_path / "huge.json"
        path.write_text(
            '{"champions": [{"name": "A", "stats": {"hp": [' + "9" * 400 + "]}}]}",
            encoding="utf-8",
        )
        with pytest.raises(UnitsLoadError, match="decode"):
            read_set_file(path)

    def test_valid(self, tmp_path):
        path = write_set_file(tmp_path / "valid.json", [{"name": "Test", "cost": 1}])
        data = read_set_file(path)
        assert len(data.champions) == 1
        assert data.champions[0].name == "Test"


class TestUnitsLoader:
    """UnitsLoader tests."""

    @pytest.fixture
    def config(self, tmp_path):
        unit_dir = tmp_path / "units"
        unit_dir.mkdir()
        (unit_dir / "Ahri.CjTbL0xA.jpg").write_bytes(b"img")
        (unit_dir / "Garen.jpg").write_bytes(b"img")
        trait_dir = tmp_path / "traits"
        trait_dir.mkdir()
        (trait_dir / "ionia.svg").write_text("<svg/>")

        set_path = write_set_file(
            tmp_path / "set.json",
            [
                AHRI,
                {"name": "Garen", "cost": 1, "traits": ["Demacia"]},
                {"name": "Nobody", "cost": 2},
            ],
        )
        return LoadUnitsConfig(
            set_data_path=set_path,
            trait_dir=str(trait_dir),
            unit_dir=str(unit_dir),
            spell_dir=str(tmp_path / "missing-spells"),
        )

    def test_defaults(self):
        config = LoadUnitsConfig()
        assert config.set_data_path == "data/set16_champions.json"
        assert config.trait_dir == "static/assets/Traits/SET16"
        assert config.unit_dir == "static/assets/Units/SET16"
        assert config.spell_dir == "static/assets/Spells/SET16/webp-64"
        assert UnitsLoader().config == config

    def test_loads_sorted_units_and_skips_missing_images(self, config, tmp_path):
        data = UnitsLoader(config).load_units()
        assert [u.name for u in data.units] == ["Garen", "Ahri"]
        ahri = data.units[1]
        assert ahri.url == (tmp_path / "units" / "Ahri.CjTbL0xA.jpg").as_posix()
        assert ahri.traits[0].icon == (tmp_path / "traits" / "ionia.svg").as_posix()

    def test_loads_once(self, config):
        loader = UnitsLoader(config)
        assert loader.load_units() is loader.load_units()

    def test_error_is_cached(self, tmp_path):
        path = tmp_path / "later.json"
        loader = UnitsLoader(LoadUnitsConfig(set_data_path=str(path)))
        with pytest.raises(UnitsLoadError):
            loader.load_units()

        write_set_file(path, [])
        with pytest.raises(UnitsLoadError):
            loader.load_units()
