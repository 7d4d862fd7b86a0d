# Copyright (c) 2026 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.

from dataclasses import replace
from revision_info import QueryResult
import git_util as git
import svn_util as svn
import sys


def get_query_methods(config, svn_found, git_found):
  """ Returns the query functions to try, in order of preference. """
  methods = []
  if svn_found:
    methods.append(svn.query_svn)
    methods.append(svn.query_svn_old_style)
  if git_found and not config.skip_git_svn:
    methods.append(git.query_git_svn)
  return methods


def query_revision(config, svn_found, git_found):
  """ Retrieves the revision and date for |config.working_dir| from the first
      query method that succeeds. Returns the default QueryResult if every
      method fails. """
  for method in get_query_methods(config, svn_found, git_found):
    result = method(config.working_dir, config)
    if result.success:
      return result

  sys.stdout.write('Warning: Could not get revision info from svn or git-svn.\n')
  return QueryResult()


def apply_revision_override(result, config):
  """ Returns |result| with the revision replaced by the one requested on the
      command line, if any. """
  if config.revision_override:
    return replace(result, revision=config.revision_override)
  return result


def detect_tools(config):
  """ Returns a (svn_found, git_found) tuple. """
  svn_found = svn.svn_exists(config)
  git_found = git.git_exists(config)
  if not svn_found:
    sys.stdout.write('Warning: Svn not found, skipping querying svn...\n')
  if not git_found:
    sys.stdout.write('Warning: Git not found, skipping querying git...\n')
  return (svn_found, git_found)
