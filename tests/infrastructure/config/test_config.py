from dataclasses import FrozenInstanceError
from unittest import TestCase
import unittest

from src.keytensor.domain._element_kind import ElementKind
from src.keytensor.infrastructure.config import TensorConfig, get_config, set_config


class TestTensorConfig(TestCase):

    def tearDown(self):
        set_config(None)

    def test_defaults(self):
        cfg = TensorConfig()
        self.assertIs(cfg.default_element_kind, ElementKind.FLOAT64)
        self.assertEqual(cfg.lock_policy, "striped")
        self.assertEqual(cfg.lock_stripes, 16)

    def test_kind_given_by_name_is_parsed(self):
        self.assertIs(TensorConfig(default_element_kind="int8").default_element_kind, ElementKind.INT8)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            TensorConfig(lock_policy="spin")
        with self.assertRaises(ValueError):
            TensorConfig(lock_stripes=0)
        with self.assertRaises(ValueError):
            TensorConfig(default_element_kind="complex")

    def test_from_env(self):
        cfg = TensorConfig.from_env(
            {
                "KEYTENSOR_DEFAULT_KIND": "INT32",
                "KEYTENSOR_LOCK_POLICY": " Mutex ",
                "KEYTENSOR_LOCK_STRIPES": "4",
            }
        )
        self.assertEqual(cfg, TensorConfig(ElementKind.INT32, "mutex", 4))

    def test_from_env_ignores_unrelated_variables(self):
        self.assertEqual(TensorConfig.from_env({"PATH": "/bin"}), TensorConfig())

    def test_from_env_invalid_stripes(self):
        with self.assertRaises(ValueError):
            TensorConfig.from_env({"KEYTENSOR_LOCK_STRIPES": "many"})

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            TensorConfig().lock_stripes = 2

    def test_set_and_get(self):
        cfg = TensorConfig(lock_policy="mutex")
        set_config(cfg)
        self.assertIs(get_config(), cfg)
        set_config(None)
        self.assertIsInstance(get_config(), TensorConfig)


if __name__ == "__main__":
    unittest.main()
