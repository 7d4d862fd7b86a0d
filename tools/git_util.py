# Copyright (c) 2014 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file

from __future__ import absolute_import
from exec_util import probe_tool
from revision_info import run_query
from svn_util import parse_svn_text_info
import sys

if sys.platform == 'win32':
  # Force use of the system installed Git version.
  git_exe = 'git.exe'
else:
  git_exe = 'git'


def git_exists(config):
  """ Returns true if the git executable can be run. """
  return probe_tool(git_exe, config)


def parse_git_svn_info(response):
  """ Parse the output of "git svn info", which uses the svn text format. """
  return parse_svn_text_info(response, source='git svn')


def query_git_svn(working_dir, config):
  """ Retrieves the revision and date of a git-svn mirror. """
  if config.verbose:
    sys.stdout.write('Querying git-svn for revision info... ')
  cmd = [git_exe, 'svn', 'info', working_dir]
  return run_query('git-svn', cmd, parse_git_svn_info, config)
