#!/usr/bin/env python3
# Copyright (c) 2026 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.
"""
Unit tests for autorevision_config.py

Running the tests:
  python3 -m unittest autorevision_config_test.py -v
"""

from autorevision_config import DEFAULT_OUTPUT_FILE, OutputConfig
import dataclasses
import unittest


class TestOutputConfig(unittest.TestCase):

  def test_defaults(self):
    config = OutputConfig()
    self.assertEqual(config.output_file, DEFAULT_OUTPUT_FILE)
    self.assertFalse(config.has_representation())
    self.assertIsNone(config.revision_override)

  def test_debug_implies_verbose(self):
    self.assertTrue(OutputConfig(debug=True).verbose)
    self.assertFalse(OutputConfig().verbose)

  def test_has_representation(self):
    self.assertTrue(OutputConfig(do_int=True).has_representation())
    self.assertTrue(OutputConfig(do_std=True).has_representation())
    self.assertTrue(OutputConfig(do_wx=True).has_representation())
    # Translation alone does not select an output format.
    self.assertFalse(OutputConfig(do_translate=True).has_representation())

  def test_immutable(self):
    config = OutputConfig()
    with self.assertRaises(dataclasses.FrozenInstanceError):
      config.verbose = True


if __name__ == '__main__':
  unittest.main()
