# Copyright (c) 2011 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.

from __future__ import absolute_import
from io import open
import os
import sys


def read_first_line(path):
  """ Returns the first line of a file without the line ending, or None if
      the file doesn't exist or can't be read. """
  if not os.path.isfile(path):
    return None
  try:
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
      return f.readline().rstrip('\r\n')
  except IOError:
    return None


def write_file(path, data):
  """ Write a file. """
  try:
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
      # write the data
      f.write(data)
  except IOError as e:
    sys.stderr.write('ERROR: Failed to write file ' + path + ': ' +
                     str(e.strerror) + '\n')
    raise
  return True


def path_exists(path):
  """ Returns true if the path currently exists. """
  return os.path.exists(path)
