import os
import tempfile
import unittest

import flowtool_core
from flow_store import FlowNotFoundError, FlowStore


class FlowtoolCorePublicApiTests(unittest.TestCase):
    def _configure(self, root_dir: str):
        return flowtool_core.configure(
            flow_dir=os.path.join(root_dir, "flows"),
            load_env=False,
        )

    def test_flow_lifecycle_and_reconfigure(self):
        with tempfile.TemporaryDirectory() as tmp:
            self._configure(tmp)
            flowtool_core.write_flow("demo", '{"x":1}')

            self.assertIn("demo", flowtool_core.list_flows())
            self.assertEqual(flowtool_core.read_flow("demo"), '{"x":1}')

            # Reconfigure to a clean directory and ensure state resets.
            fresh_root = os.path.join(tmp, "fresh")
            self._configure(fresh_root)
            self.assertEqual(flowtool_core.list_flows(), [])
            with self.assertRaises(FlowNotFoundError):
                flowtool_core.read_flow("demo")

    def test_delete_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            self._configure(tmp)
            flowtool_core.write_flow("demo", "{}")
            flowtool_core.delete_flow("demo")
            flowtool_core.delete_flow("demo")
            self.assertEqual(flowtool_core.list_flows(), [])

    def test_configure_accepts_injected_store(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = FlowStore(tmp)
            installed = flowtool_core.configure(flow_store=store)
            self.assertIs(installed, store)
            flowtool_core.write_flow("injected", "data")
            self.assertEqual(store.read_flow("injected"), "data")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
