# Copyright (c) 2026 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file.
"""
This utility creates the autorevision header file containing the revision
number and date of a svn or git-svn working copy.

Usage:
  python3 make_autorevision_header.py +int +std -v /path/to/checkout \
    include/autorevision.h
"""

from autorevision_config import DEFAULT_OUTPUT_FILE, OutputConfig
from file_util import path_exists, read_first_line, write_file
import argparse
import os
import revision_query
import sys

# Options understood by create_parser(). Anything else on the command line is
# a path or a mistyped option.
FLAG_OPTIONS = ('-v', '--verbose', '--debug', '-h', '--help', '+int', '+std',
                '+wx', '+t', '--skip-git-svn')
VALUE_OPTIONS = ('--revision',)


def _bool_string(value):
  return 'true' if value else 'false'


def _escape_tag_value(value):
  # The tag must stay a single line and a single comment.
  return value.replace('\\', '\\\\').replace('\n', '\\n').replace(
      '\r', '\\r').replace('*/', '*\\/')


def make_revision_tag(revision, date, config):
  """ Returns the first line of the header. It identifies everything the
      contents depend on so that an unchanged header is never rewritten. """
  return '/* revision:%s;date:%s;do_int:%s;do_std:%s;do_translate:%s;' \
         'do_wx:%s */' % (_escape_tag_value(revision),
                          _escape_tag_value(date), _bool_string(config.do_int),
                          _bool_string(config.do_std),
                          _bool_string(config.do_translate),
                          _bool_string(config.do_wx))


def make_string_literal(value, config):
  """ Returns |value| as a C++ string literal, wrapped in the _T() translation
      macro if requested. """
  literal = '"%s"' % value.replace('\\', '\\\\').replace('"', '\\"').replace(
      '\n', '\\n').replace('\r', '\\r')
  if config.do_translate:
    return '_T(%s)' % literal
  return literal


def make_autorevision_header(revision, date, config):
  """ Returns the contents of the autorevision header. """
  result = make_revision_tag(revision, date, config) + '\n' + \
           '// This file is generated by the make_autorevision_header.py tool.\n' + \
           '// Do not edit it manually.\n\n' + \
           '#ifndef AUTOREVISION_H\n' + \
           '#define AUTOREVISION_H\n\n'

  if config.do_std:
    result += '#include <string>\n'
  if config.do_wx:
    result += '#include <wx/string.h>\n'
  if config.do_std or config.do_wx:
    result += '\n'

  if config.has_representation():
    revision_string = make_string_literal(revision, config)
    date_string = make_string_literal(date, config)

    result += 'namespace autorevision {\n'
    if config.do_int:
      result += '  const unsigned int svn_revision = %s;\n' % revision
    if config.do_std:
      result += '  const std::string svn_revision_s(%s);\n' % revision_string
    if config.do_wx:
      result += '  const wxString svnRevision(%s);\n' % revision_string
    if config.do_std:
      result += '  const std::string svn_date_s(%s);\n' % date_string
    if config.do_wx:
      result += '  const wxString svnDate(%s);\n' % date_string
    result += '}  // namespace autorevision\n\n'

  result += '#endif  // AUTOREVISION_H\n'
  return result


def write_autorevision_header(header, revision, date, config):
  """ Creates the header file for the given revision and date if the
      information has changed or if the file doesn't already exist. Returns
      False only if the file could not be written. """
  tag = make_revision_tag(revision, date, config)
  if read_first_line(header) == tag:
    if config.verbose:
      sys.stdout.write(
          'Revision unchanged - %s. Nothing to do here...\n' % revision)
    return True

  if config.debug:
    if path_exists(header):
      sys.stdout.write('Updating %s.\n' % header)
    else:
      sys.stdout.write('Creating %s.\n' % header)

  try:
    write_file(header, make_autorevision_header(revision, date, config))
  except (IOError, OSError):
    sys.stdout.write('Error: Could not open %s for writing...\n' % header)
    return False

  if config.verbose:
    sys.stdout.write('Done\n')
  return True


def create_parser():
  parser = argparse.ArgumentParser(
      prog='autorevision',
      usage='%(prog)s [options] directory [autorevision.h]',
      description='Writes the svn revision number and date of a working copy '
      'to a C++ header file.',
      prefix_chars='-+',
      allow_abbrev=False,
      add_help=False)
  parser.add_argument(
      '-v', '--verbose', action='store_true', help='be verbose')
  parser.add_argument(
      '--debug',
      action='store_true',
      help='so you want even more information?')
  parser.add_argument(
      '-h',
      '--help',
      action='store_true',
      help='display help (this screen) and exit')
  parser.add_argument(
      '+int',
      dest='do_int',
      action='store_true',
      help='assign const unsigned int')
  parser.add_argument(
      '+std',
      dest='do_std',
      action='store_true',
      help='assign const std::string')
  parser.add_argument(
      '+wx', dest='do_wx', action='store_true', help='assign const wxString')
  parser.add_argument(
      '+t',
      dest='do_translate',
      action='store_true',
      help='add Unicode translation macros to strings')
  parser.add_argument(
      '--skip-git-svn',
      action='store_true',
      help='do not query git-svn if svn fails')
  parser.add_argument(
      '--revision',
      dest='revision',
      metavar='NUMBER',
      help='set custom revision number')
  return parser


def is_option_like(arg):
  """ Returns true if |arg| looks like a mistyped option, e.g. +v. """
  prefixes = ('+', '-', '\\')
  if sys.platform == 'win32':
    # Absolute paths start with a slash everywhere else.
    prefixes += ('/',)
  return arg.startswith(prefixes)


def split_args(argv):
  """ Separates the options registered by create_parser() from all other
      arguments, keeping the order of both. A value option always consumes
      the following argument, even if it looks like an option. """
  known = []
  extra = []
  pending = None
  for arg in argv:
    if pending is not None:
      known.append('%s=%s' % (pending, arg))
      pending = None
    elif arg in VALUE_OPTIONS:
      pending = arg
    elif arg in FLAG_OPTIONS or arg.split('=', 1)[0] in VALUE_OPTIONS:
      known.append(arg)
    else:
      extra.append(arg)
  if pending is not None:
    # Let argparse report the missing value.
    known.append(pending)
  return (known, extra)


def parse_args(argv, parser=None):
  """ Parse the command line. Returns a (config, show_help) tuple. """
  if parser is None:
    parser = create_parser()
  (known, extra) = split_args(argv)
  options = parser.parse_args(known)

  if options.debug:
    for i, arg in enumerate(argv):
      sys.stdout.write('command line option %d: %s\n' % (i + 1, arg))

  working_dir = ''
  output_file = ''
  for arg in extra:
    if is_option_like(arg):
      sys.stdout.write('Warning: Unknown command line option %s. '
                       'Didn\'t you misspell it?\n'
                       'Use --help to see available options.\n' % arg)
    elif working_dir == '':
      working_dir = arg
    elif output_file == '':
      output_file = arg
    else:
      sys.stdout.write('Warning: Ignoring unknown command line option %s.\n' %
                       arg)

  config = OutputConfig(
      working_dir=working_dir,
      output_file=output_file or DEFAULT_OUTPUT_FILE,
      do_int=options.do_int,
      do_std=options.do_std,
      do_wx=options.do_wx,
      do_translate=options.do_translate,
      verbose=options.verbose,
      debug=options.debug,
      skip_git_svn=options.skip_git_svn,
      revision_override=options.revision or None)
  return (config, options.help)


def _yes_no(value):
  return 'yes' if value else 'no'


def write_debug_summary(config):
  sys.stdout.write(
      'You may notice I\'m a little bit more verbose than usual - hey, you '
      'asked for it.\n'
      'I should output revision number (and date) as:\n'
      '        const unsigned int    %s\n'
      '        std::string           %s\n'
      '        wxString              %s\n'
      'Will use Unicode translation macros for strings:\n'
      '                              %s\n'
      'Should I skip git-svn?\n'
      '                              %s\n\n' %
      (_yes_no(config.do_int), _yes_no(config.do_std), _yes_no(config.do_wx),
       _yes_no(config.do_translate), _yes_no(config.skip_git_svn)))
  sys.stdout.write('Do you want to override revision number?\n'
                   '                              %s\n' %
                   _yes_no(config.revision_override))
  if config.revision_override:
    sys.stdout.write('             Revision number: %s\n' %
                     config.revision_override)
  sys.stdout.write('\nWorking directory:    %s\n'
                   'Output file:          %s\n\n' %
                   (config.working_dir, config.output_file))


def main(argv=None):
  if argv is None:
    argv = sys.argv[1:]

  # Ensure an english environment, needed to correctly parse the output of a
  # localized (git) svn info.
  os.environ['LC_ALL'] = 'C'

  parser = create_parser()
  (config, show_help) = parse_args(argv, parser)
  if show_help or config.working_dir == '':
    parser.print_help(sys.stdout)
    return 1

  if config.debug:
    write_debug_summary(config)

  if not config.has_representation():
    sys.stdout.write('Error: You seem to forgot to specify how do you want to '
                     'output the revision number... Use --help for command '
                     'line options.\n')
    return 1

  (svn_found, git_found) = revision_query.detect_tools(config)
  result = revision_query.query_revision(config, svn_found, git_found)
  result = revision_query.apply_revision_override(result, config)

  if not write_autorevision_header(config.output_file, result.revision,
                                   result.date, config):
    sys.stdout.write('Error: Could not output revision number to the header '
                     'file... If you depend on this file, your build will '
                     'probably fail. Sorry.\n'
                     'Try adding -v or --debug to command line options to get '
                     'verbose output.\n')
    return 1

  if config.verbose:
    sys.stdout.write('Finished...\n')
  return 0


if __name__ == '__main__':
  sys.exit(main())
