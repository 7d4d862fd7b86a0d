# Copyright (c) 2026 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.

from dataclasses import dataclass
from typing import Optional

DEFAULT_OUTPUT_FILE = 'autorevision.h'


@dataclass(frozen=True)
class OutputConfig:
  """ Settings for a single autorevision run. Created once from the command
      line and passed to every component. """
  working_dir: str = ''
  output_file: str = DEFAULT_OUTPUT_FILE
  do_int: bool = False
  do_std: bool = False
  do_wx: bool = False
  do_translate: bool = False
  verbose: bool = False
  debug: bool = False
  skip_git_svn: bool = False
  revision_override: Optional[str] = None

  def __post_init__(self):
    # Debug output implies verbose output.
    if self.debug and not self.verbose:
      object.__setattr__(self, 'verbose', True)

  def has_representation(self):
    """ Returns True if at least one output representation is enabled. """
    return self.do_int or self.do_std or self.do_wx
