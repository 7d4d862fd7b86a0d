# Copyright (c) 2026 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.

from dataclasses import dataclass
from exec_util import exec_vcs_query
from typing import Optional
import sys

# Values used when no query method could determine the revision.
DEFAULT_REVISION = '0'
DEFAULT_DATE = 'unknown date'


class RevisionParseError(Exception):
  """ Raised when a version control response cannot be parsed. """
  pass


@dataclass(frozen=True)
class QueryResult:
  """ Revision and commit date reported by a query method. |method| names the
      method that produced the values, or is None for the defaults. """
  revision: str = DEFAULT_REVISION
  date: str = DEFAULT_DATE
  success: bool = False
  method: Optional[str] = None


def run_query(method, cmd, parse, config):
  """ Execute |cmd| and extract the revision and date from its response using
      |parse|. |parse| receives the response text and returns a (revision,
      date) tuple, where date may be None if unknown, or raises
      RevisionParseError. Returns a QueryResult that is only successful if the
      command and the parsing both succeeded. """
  (ok, response) = exec_vcs_query(cmd, config)
  if not ok:
    if config.verbose:
      sys.stdout.write('Unsuccessful\n')
    if config.debug:
      sys.stdout.write('-> %s didn\'t exit successfully.\n' % cmd[0])
    return QueryResult()

  try:
    (revision, date) = parse(response)
  except RevisionParseError as e:
    if config.verbose:
      sys.stdout.write('Unsuccessful\n')
    sys.stdout.write('Error: %s\n' % e)
    return QueryResult()

  if date is None:
    date = DEFAULT_DATE

  if config.verbose:
    sys.stdout.write('Success\n'
                     '    Found revision: %s\n'
                     '    Found date:     %s\n' % (revision, date))
  return QueryResult(revision=revision, date=date, success=True, method=method)
