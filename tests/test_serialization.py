import logging
import math
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from vecmath import Vector3, Precision
from vecmath.structured_data import (
    OSD,
    OSDType,
    OSDArray,
    OSDInteger,
    OSDMap,
    OSDReal,
    OSDString,
    parse_llsd_xml,
    python_to_osd,
    serialize_llsd_xml,
)


def test_to_bytes_defaults_to_double_precision():
    v = Vector3(1.5, -2.0, 0.1)
    data = v.to_bytes()
    assert len(data) == 24
    assert Vector3.from_bytes(data) == v


def test_single_precision_bytes():
    v = Vector3(1.5, -2.0, 0.25)
    data = v.to_bytes(Precision.SINGLE)
    assert len(data) == 12
    assert data[:4] == bytes.fromhex("0000c03f")
    assert Vector3.from_bytes(data, precision=Precision.SINGLE) == v


def test_from_bytes_with_offset():
    v = Vector3(7.0, 8.0, 9.0)
    data = b"\x01\x02" + v.to_bytes()
    assert Vector3.from_bytes(data, offset=2) == v


def test_from_bytes_rejects_negative_offset():
    data = Vector3(1.0, 2.0, 3.0).to_bytes() * 2
    with pytest.raises(ValueError):
        Vector3.from_bytes(data, offset=-24)
    with pytest.raises(ValueError):
        Vector3.from_bytes(data, offset=-1, precision=Precision.SINGLE)


def test_from_bytes_rejects_short_input():
    with pytest.raises(ValueError):
        Vector3.from_bytes(b"\x00" * 23)
    with pytest.raises(ValueError):
        Vector3.from_bytes(b"\x00" * 12, offset=1, precision=Precision.SINGLE)


def test_dict_fields_are_named_and_ordered():
    v = Vector3(1.0, 2.0, 3.0)
    d = v.to_dict()
    assert d == {"x": 1.0, "y": 2.0, "z": 3.0}
    assert list(d) == ["x", "y", "z"]
    assert Vector3.from_dict(d) == v
    with pytest.raises(KeyError):
        Vector3.from_dict({"x": 1.0, "y": 2.0})


def test_vector_to_osd_map():
    osd = python_to_osd(Vector3(1.0, 2.0, 3.0))
    assert isinstance(osd, OSDMap)
    assert list(osd) == ["x", "y", "z"]
    assert osd["y"] == OSDReal(2.0)
    assert osd.as_python_object() == {"x": 1.0, "y": 2.0, "z": 3.0}
    assert osd.as_vector3() == Vector3(1.0, 2.0, 3.0)


def test_vector_from_osd_array_accepts_integers():
    osd = OSDArray([1, 2.5, OSDInteger(-3)])
    assert osd.as_vector3() == Vector3(1.0, 2.5, -3.0)


def test_vector_from_malformed_osd():
    with pytest.raises(ValueError):
        OSDMap({"x": 1.0, "z": 2.0}).as_vector3()
    with pytest.raises(ValueError):
        OSDArray([1.0, 2.0]).as_vector3()
    with pytest.raises(TypeError):
        OSDString("1 2 3").as_vector3()
    with pytest.raises(TypeError):
        OSDMap({"x": "a", "y": 1.0, "z": 1.0}).as_vector3()


def test_llsd_xml_layout():
    xml = serialize_llsd_xml(python_to_osd(Vector3(1.5, -2.0, 3.25)))
    assert xml == (
        "<llsd><map>"
        "<key>x</key><real>1.5</real>"
        "<key>y</key><real>-2.0</real>"
        "<key>z</key><real>3.25</real>"
        "</map></llsd>"
    )


def test_llsd_xml_round_trip_keeps_non_finite_components():
    v = Vector3(math.inf, -math.inf, 0.1)
    parsed = parse_llsd_xml(serialize_llsd_xml(python_to_osd(v), pretty_print=True))
    assert parsed.as_vector3() == v


def test_parse_llsd_xml_array_vector():
    parsed = parse_llsd_xml(
        b"<llsd><array><real>1</real><integer>2</integer><real>3.5</real></array></llsd>"
    )
    assert parsed.osd_type == OSDType.ARRAY
    assert parsed.as_vector3() == Vector3(1.0, 2.0, 3.5)


def test_parse_llsd_xml_mixed_map():
    parsed = parse_llsd_xml(
        "<llsd><map>"
        "<key>name</key><string>probe</string>"
        "<key>active</key><boolean>true</boolean>"
        "<key>blob</key><binary>AAE=</binary>"
        "<key>nothing</key><undef />"
        "<key>position</key><map><key>x</key><real>1</real><key>y</key><real>2</real>"
        "<key>z</key><real>3</real></map>"
        "</map></llsd>"
    )
    assert parsed.as_python_object() == {
        "name": "probe",
        "active": True,
        "blob": b"\x00\x01",
        "nothing": None,
        "position": {"x": 1.0, "y": 2.0, "z": 3.0},
    }
    assert parsed["position"].as_vector3() == Vector3(1.0, 2.0, 3.0)
    assert serialize_llsd_xml(parsed).count("<binary>AAE=</binary>") == 1


def test_parse_llsd_xml_logs_and_returns_undef_on_error(caplog):
    with caplog.at_level(logging.WARNING, logger="vecmath"):
        parsed = parse_llsd_xml("<llsd><map>")
    assert parsed == OSD()
    assert parsed.as_python_object() is None
    assert "LLSD XML parsing failed" in caplog.text


def test_parse_llsd_xml_warns_on_unknown_tag(caplog):
    with caplog.at_level(logging.WARNING, logger="vecmath"):
        parsed = parse_llsd_xml("<llsd><quaternion>1</quaternion></llsd>")
    assert parsed.osd_type == OSDType.UNKNOWN
    assert "quaternion" in caplog.text


@pytest.mark.parametrize("xml, tag", [
    ("<llsd><map><key>x</key><real>abc</real></map></llsd>", "real"),
    ("<llsd><integer>1.5</integer></llsd>", "integer"),
    ("<llsd><binary>A</binary></llsd>", "binary"),
    ("<llsd><binary>@@@@</binary></llsd>", "binary"),
])
def test_parse_llsd_xml_warns_on_bad_value_text(caplog, xml, tag):
    with caplog.at_level(logging.WARNING, logger="vecmath"):
        parsed = parse_llsd_xml(xml)
    if parsed.osd_type == OSDType.MAP:
        parsed = parsed["x"]
    assert parsed == OSD()
    assert f"Bad <{tag}> content" in caplog.text


def test_vector_with_bad_component_text_cannot_be_read(caplog):
    with caplog.at_level(logging.WARNING, logger="vecmath"):
        parsed = parse_llsd_xml(
            "<llsd><map><key>x</key><real>1</real><key>y</key><real>two</real>"
            "<key>z</key><real>3</real></map></llsd>"
        )
    with pytest.raises(TypeError):
        parsed.as_vector3()


def test_python_to_osd_rejects_unknown_types():
    with pytest.raises(TypeError):
        python_to_osd(object())
