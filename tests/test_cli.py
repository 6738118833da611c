"""
Tests for the glb-inspect command line entry point.
"""

import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from glb_reader.__main__ import (
    EXIT_ACCESSOR_ERROR,
    EXIT_CONTAINER_ERROR,
    EXIT_OK,
    main,
)
from tests.glb_builder import build_glb, quad_metadata


class TestInspectCommand(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write(self, name: str, data: bytes) -> Path:
        path = self.temp_dir / name
        path.write_bytes(data)
        return path

    def _run(self, *argv: str) -> tuple[int, str]:
        output = io.StringIO()
        with redirect_stdout(output):
            exit_code = main(list(argv))

        return exit_code, output.getvalue()

    def test_reports_quad(self):
        metadata, binary = quad_metadata()
        path = self._write("card.glb", build_glb(metadata, binary))

        exit_code, output = self._run(str(path), "--samples", "2")

        self.assertEqual(exit_code, EXIT_OK)
        self.assertIn("Mesh 0, primitive 0:", output)
        self.assertIn("POSITION (accessor 0): VEC3 x 4", output)
        self.assertIn("TEXCOORD_0 (accessor 1): VEC2 x 4", output)
        self.assertIn("Coverage: 100.00% of texture", output)
        self.assertIn("Triangles: 2", output)
        self.assertIn("[1]: [1.0, 0.0, 0.0]", output)

    def test_negative_samples_rejected(self):
        metadata, binary = quad_metadata()
        path = self._write("card.glb", build_glb(metadata, binary))
        errors = io.StringIO()

        with redirect_stderr(errors), self.assertRaises(SystemExit) as context:
            self._run(str(path), "--samples", "-2")

        self.assertEqual(context.exception.code, 2)
        self.assertIn("--samples", errors.getvalue())

    def test_malformed_file(self):
        path = self._write("broken.glb", b"glTF\x02\x00\x00\x00")

        with self.assertLogs(level="ERROR") as logs:
            exit_code, _ = self._run(str(path))

        self.assertEqual(exit_code, EXIT_CONTAINER_ERROR)
        self.assertIn("broken.glb", logs.output[0])

    def test_missing_file(self):
        with self.assertLogs(level="ERROR"):
            exit_code, _ = self._run(str(self.temp_dir / "missing.glb"))

        self.assertEqual(exit_code, EXIT_CONTAINER_ERROR)

    def test_failed_accessor_is_skipped(self):
        metadata, binary = quad_metadata()
        metadata["accessors"][1]["componentType"] = 9999
        path = self._write("card.glb", build_glb(metadata, binary))

        with self.assertLogs(level="ERROR") as logs:
            exit_code, output = self._run(str(path))

        self.assertEqual(exit_code, EXIT_ACCESSOR_ERROR)
        self.assertIn("TEXCOORD_0", logs.output[0])
        self.assertIn("9999", logs.output[0])
        self.assertIn("POSITION (accessor 0)", output)
        self.assertIn("Triangles: 2", output)

    def test_lenient_decodes_unknown_component_type(self):
        metadata, binary = quad_metadata()
        metadata["accessors"][1]["componentType"] = 9999
        path = self._write("card.glb", build_glb(metadata, binary))

        with self.assertLogs(level="WARNING"):
            exit_code, output = self._run(str(path), "--lenient")

        self.assertEqual(exit_code, EXIT_OK)
        self.assertIn("Coverage: 0.00% of texture", output)


if __name__ == "__main__":
    unittest.main()
