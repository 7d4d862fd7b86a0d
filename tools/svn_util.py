# Copyright (c) 2014 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file

from __future__ import absolute_import
from exec_util import probe_tool
from revision_info import RevisionParseError, run_query
import re
import sys
import xml.etree.ElementTree as ET

if sys.platform == 'win32':
  svn_exe = 'svn.exe'
else:
  svn_exe = 'svn'

REVISION_LABEL = 'Last Changed Rev: '
DATE_LABEL = 'Last Changed Date: '


def svn_exists(config):
  """ Returns true if the svn executable can be run. """
  return probe_tool(svn_exe, config)


def parse_svn_xml_info(response):
  """ Parse the output of "svn info --xml". Returns a (revision, date) tuple.
      The date is converted from "2023-05-06T07:08:09.123456Z" to
      "2023-05-06 07:08:09" and is None if the commit has no date. """
  try:
    root = ET.fromstring(response)
  except ET.ParseError as e:
    raise RevisionParseError(
        'Unable to parse information in XML format returned by svn.\n%s' % e)

  commit = None
  if root.tag == 'info':
    entry = root.find('entry')
    if entry is not None:
      commit = entry.find('commit')
  if commit is None:
    raise RevisionParseError('Unable to get revision info.')

  revision = commit.attrib.get('revision', '')
  if revision == '':
    raise RevisionParseError('Unable to get revision number from svn.')

  date = None
  date_element = commit.find('date')
  if date_element is not None and date_element.text:
    date = date_element.text.replace('T', ' ', 1)
    # Remove the fractional seconds and time zone.
    pos = date.rfind('.')
    if pos >= 0:
      date = date[:pos]
  return (revision, date)


def parse_svn_text_info(response, source='svn old-style'):
  """ Parse the plain text output of "svn info" or "git svn info". Returns a
      (revision, date) tuple. """
  revision = ''
  pos = response.find(REVISION_LABEL)
  if pos >= 0:
    pos += len(REVISION_LABEL)
    revision = re.match('[0-9]*', response[pos:]).group(0)
  if revision == '':
    raise RevisionParseError(
        'Cannot parse revision number from %s response.' % source)

  # The date ends at the second space, e.g. "2022-03-04 05:06:07 +0000 (...)".
  date = ''
  pos = response.find(DATE_LABEL)
  if pos >= 0:
    pos += len(DATE_LABEL)
    end = response.find(' ', pos)
    if end >= 0:
      end = response.find(' ', end + 1)
    if end >= 0:
      date = response[pos:end]
  if date == '':
    raise RevisionParseError(
        'Cannot parse date format from %s response.' % source)
  return (revision, date)


def query_svn(working_dir, config):
  """ Retrieves the revision and date from "svn info --xml". """
  if config.verbose:
    sys.stdout.write('Querying svn for revision number... ')
  cmd = [svn_exe, 'info', '--xml', '--non-interactive', working_dir]
  return run_query('svn', cmd, parse_svn_xml_info, config)


def query_svn_old_style(working_dir, config):
  """ Retrieves the revision and date from the plain text "svn info" output
      used by old svn versions. """
  if config.verbose:
    sys.stdout.write('Querying svn the old style... ')
  cmd = [svn_exe, 'info', '--non-interactive', working_dir]
  return run_query('svn old-style', cmd, parse_svn_text_info, config)
