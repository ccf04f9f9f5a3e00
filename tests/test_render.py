import io
import json
import unittest
from datetime import datetime
from lxml import etree
from lsreg.iterate import iter_records
from lsreg.models import Identifier, Record, RecordType
from lsreg.render.jsonl import JsonRenderer, record_to_dict
from lsreg.render.plain import PlainRenderer
from lsreg.render.register_builtin import get_renderer_registry
from lsreg.render.xml import XmlRenderer
from samples import FULL_DUMP, as_stream


def _render(renderer, records) -> str:
    out = io.StringIO()
    renderer.begin(out)
    for record in records:
        renderer.render(record, out)
    renderer.end(out)
    return out.getvalue()


class TestPlainRenderer(unittest.TestCase):
    def setUp(self):
        self.records = list(iter_records(as_stream(FULL_DUMP)))

    def test_bundle_block(self):
        text = _render(PlainRenderer(), self.records[:1])
        self.assertTrue(text.startswith("<lsreg_bundle_t>{\n  uid                  = 12\n"))
        self.assertIn("  identifier           = <lsreg_identifier_t>{\n"
                      '    name = "com.example.FooBar"\n'
                      "    hash = 0x8000702f\n"
                      "  }\n", text)
        self.assertIn('  type_code            = "APPL"\n', text)
        self.assertIn("  moddate              = 2006-06-26 02:41:56\n", text)
        self.assertIn('  library_items        = [\n    "Foo.plugin"\n    "Bar.plugin"\n    "Baz.plugin"\n  ]\n', text)
        self.assertTrue(text.endswith("}\n"))

    def test_absent_values(self):
        record = Record()
        record.assign(RecordType.BUNDLE, 1)
        text = _render(PlainRenderer(), [record])
        self.assertIn('  path                 = "(null)"\n', text)
        self.assertIn("  regdate              = 0000-00-00 00:00:00\n", text)
        self.assertIn("  library_items        = NULL\n", text)

    def test_volume_and_handler(self):
        text = _render(PlainRenderer(), self.records[1:])
        self.assertIn("  is_mounted = YES\n", text)
        self.assertIn("  vrefnum    = -105\n", text)
        self.assertIn("  flags      = 0x0\n", text)
        self.assertIn('  uri_scheme   = "http"\n', text)
        self.assertIn("  options      = 0x0\n", text)

    def test_unknown(self):
        self.assertEqual(_render(PlainRenderer(), [Record()]),
                         "No dump function for record of type unknown\n")


class TestXmlRenderer(unittest.TestCase):
    def _document(self, records):
        return etree.fromstring(_render(XmlRenderer(), records).encode("utf-8"))

    def test_document(self):
        root = self._document(list(iter_records(as_stream(FULL_DUMP))))
        self.assertEqual(root.tag, "records")
        self.assertEqual([el.tag for el in root], ["bundle", "volume", "handler"])

        bundle = root[0]
        self.assertEqual(bundle.get("id"), "12")
        self.assertEqual(bundle.get("name"), "Foo Bar")
        self.assertEqual(bundle.get("type_code"), "APPL")
        self.assertEqual(bundle.get("identifier"), "com.example.FooBar")
        self.assertEqual(bundle.find("identifier").get("hash"), "8000702f")
        self.assertEqual(bundle.findtext("path"), "/Applications/Foo Bar.app")
        self.assertEqual(bundle.findtext("moddate"), "2006-06-26T02:41:56")
        self.assertEqual([i.text for i in bundle.find("library_items")],
                         ["Foo.plugin", "Bar.plugin", "Baz.plugin"])

        volume = root[1]
        self.assertEqual(volume.get("mounted"), "true")
        self.assertEqual(volume.get("vrefnum"), "-105")
        self.assertEqual(volume.get("flags"), "00000000")
        self.assertEqual(volume.findtext("disk_image"), "/Users/me/Downloads/foo.dmg")

        handler = root[2]
        self.assertEqual(handler.get("uri_scheme"), "http")
        self.assertEqual(handler.find("roles").text, "com.apple.safari")
        self.assertEqual(handler.find("roles").get("hash"), "2ab0080")

    def test_escaping(self):
        record = Record()
        bundle = record.assign(RecordType.BUNDLE, 5)
        bundle.name = 'Tom & "Jerry" <Deluxe>'
        bundle.path = "/Applications/Tom & Jerry.app"
        bundle.identifier = Identifier("com.example.tom\x01jerry", 1)
        root = self._document([record])
        self.assertEqual(root[0].get("name"), 'Tom & "Jerry" <Deluxe>')
        self.assertEqual(root[0].findtext("path"), "/Applications/Tom & Jerry.app")
        self.assertEqual(root[0].findtext("identifier"), "com.example.tomjerry")

    def test_empty_values_are_omitted(self):
        record = Record()
        bundle = record.assign(RecordType.BUNDLE, 5)
        bundle.path = ""
        bundle.library_items = []
        el = self._document([record])[0]
        self.assertIsNone(el.find("path"))
        self.assertIsNone(el.find("library_items"))
        self.assertIsNone(el.find("identifier"))
        self.assertEqual(el.get("name"), "")

    def test_unknown_records_skipped(self):
        root = self._document([Record()])
        self.assertEqual(len(root), 0)


class TestJsonRenderer(unittest.TestCase):
    def test_round_trip_of_parsed_fields(self):
        records = list(iter_records(as_stream(FULL_DUMP)))
        lines = _render(JsonRenderer(), records).splitlines()
        self.assertEqual(len(lines), 3)

        bundle = json.loads(lines[0])
        source = records[0].rec
        self.assertEqual(bundle["type"], "bundle")
        self.assertEqual(bundle["uid"], source.uid)
        for key in ("path", "name", "version", "type_code", "executable", "icon", "library", "library_items"):
            self.assertEqual(bundle[key], getattr(source, key))
        self.assertEqual(bundle["identifier"], {"name": "com.example.FooBar", "hash": 0x8000702F})
        self.assertEqual(datetime.fromisoformat(bundle["mod_date"]), source.mod_date)

        volume = json.loads(lines[1])
        self.assertEqual(volume["is_mounted"], True)
        self.assertEqual(volume["flags"], 0)

    def test_unknown(self):
        self.assertEqual(record_to_dict(Record()), {"type": "unknown", "uid": 0})


class TestRendererRegistry(unittest.TestCase):
    def test_builtin_formats(self):
        registry = get_renderer_registry()
        self.assertEqual(set(registry.list_formats()), {"c", "xml", "json"})
        self.assertIsInstance(registry.get("XML"), XmlRenderer)

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            get_renderer_registry().get("yaml")


if __name__ == "__main__":
    unittest.main()
