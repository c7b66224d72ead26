"""Parse CS:GO server log lines into typed events.

A log line is ``L MM/DD/YYYY - HH:MM:SS: <payload>``.  The prefix grammar
is a hard requirement: a line without it raises NoMatch.  The payload is
tried against an ordered table of recognizers, each one a full-payload
regular expression and an extractor from the extractors module; the first
recognizer that matches builds the event.  A payload nothing recognizes
becomes an Unknown event.
"""
from collections import namedtuple
from datetime import datetime
import logging
import re

from pyparsing import Literal, ParseException, Regex

import extractors
from extractors import Malformed
from logevents import GET5_EVENTS, Unknown

log = logging.getLogger(__name__)


class NoMatch(ValueError):
    """The line does not start with a log timestamp."""


class BadTimestamp(NoMatch):
    """The timestamp prefix matched but is not a valid date and time."""


TIME_FORMAT = '%m/%d/%Y - %H:%M:%S'
HTTP_TIME_FORMAT = '%m/%d/%Y - %H:%M:%S.%f'

# Everything after the prefix, newlines included.
payload = Regex(r'(?s).*')

logline = (Literal('L ').suppress() +
           Regex(r'\d{2}/\d{2}/\d{4} - \d{2}:\d{2}:\d{2}')('timestamp') +
           Literal(': ').suppress() +
           payload('payload')).leave_whitespace().parse_with_tabs()

# Lines relayed by the HTTP log listener (logaddress_add_http) lack the
# leading "L " and carry milliseconds.
httpline = (Regex(r'\d{2}/\d{2}/\d{4} - \d{2}:\d{2}:\d{2}\.\d{3}')('timestamp') +
            Literal(' - ').suppress() +
            payload('payload')).leave_whitespace().parse_with_tabs()

FRAMINGS = {
    'log': (logline, TIME_FORMAT),
    'http': (httpline, HTTP_TIME_FORMAT),
}


Recognizer = namedtuple('Recognizer', 'name grammar extractor')

global_flags = re.compile(r'^(?:\(\?[aiLmsux]+\))+')


def anchored(pattern):
    """A pyparsing Regex that must consume the whole payload.

    Trailing whitespace is tolerated.  Matches are returned as re.Match
    objects so extractors see the groups in pattern order.
    """
    # Inline global flags such as (?i) must stay at the start of the
    # expression, so they are carried over as compile flags instead.
    pattern = re.compile(pattern)
    text = global_flags.sub('', pattern.pattern)
    compiled = re.compile(r'(?:%s)\s*\Z' % text, pattern.flags)
    return Regex(compiled, as_match=True).leave_whitespace().parse_with_tabs()


def recognizer(name, pattern, extractor):
    return Recognizer(name, anchored(pattern), extractor)


def make_recognizers(table):
    """Normalize a caller supplied table into a tuple of Recognizers.

    table may be a sequence of Recognizers or (pattern, extractor) pairs,
    or a mapping of pattern to extractor.  Patterns are regex strings or
    compiled patterns; order is kept, so earlier entries take precedence.
    """
    if hasattr(table, 'items'):
        table = table.items()
    recognizers = []
    for entry in table:
        if isinstance(entry, Recognizer):
            recognizers.append(entry)
            continue
        pattern, extractor = entry
        name = getattr(extractor, '__name__', repr(extractor))
        recognizers.append(recognizer(name, pattern, extractor))
    return tuple(recognizers)


# Pattern fragments.  A player is "name<userid><steamid><side>"; bots
# have the steam id BOT.
side = r'(TERRORIST|CT)'
player = r'"(.+?)<(\d+)><([\w:]+)><%s>"'
actor = player % side
newcomer = r'"(.+?)<(\d+)><([\w:]+)><>"'
position = r'\[(-?\d+) (-?\d+) (-?\d+)\]'
team = r'(Unassigned|Spectator|TERRORIST|CT)'
fpos = r'(-?\d+\.\d+) (-?\d+\.\d+) (-?\d+\.\d+)'

kill = (actor + ' ' + position + ' killed ' + actor + ' ' + position +
        r' with "(\w+)"(?: \(([^)]*)\))?')
attack = (actor + ' ' + position + ' attacked ' + actor + ' ' + position +
          r' with "(\w+)" \(damage "(\d+)"\) \(damage_armor "(\d+)"\)'
          r' \(health "(\d+)"\) \(armor "(\d+)"\) \(hitgroup "([\w ]+)"\)')
kill_other = (actor + ' ' + position + r' killed other "(.+?)<(\d+)>" ' +
              position + r' with "(\w+)"(?: \([^)]*\))?')
blinded = (actor + r' blinded for ([\d.]+) by ' + actor +
           r' from flashbang entindex (\d+)')
get5_event = (r'get5_event: \{"matchid":"(\w*)","params":(.*),'
              r'"event":"(%s)"\}' % '|'.join(GET5_EVENTS))

# Precedence: patterns naming two players or carrying many fields come
# first, then single player actions, then world and server lines.  No two
# of these match the same payload; the order only makes that explicit.
DEFAULT_RECOGNIZERS = (
    recognizer('attack', attack, extractors.player_attack),
    recognizer('kill_other', kill_other, extractors.player_kill_other),
    recognizer('kill', kill, extractors.player_kill),
    recognizer('kill_assist', actor + ' assisted killing ' + actor,
               extractors.player_kill_assist),
    recognizer('blinded', blinded, extractors.player_blinded),

    recognizer('killed_bomb', actor + ' ' + position + r' was killed by the bomb\.',
               extractors.player_killed_bomb),
    recognizer('suicide', actor + ' ' + position + r' committed suicide with "(.*)"',
               extractors.player_killed_suicide),
    recognizer('threw', actor + r' threw (\w+) ' + position +
               r'(?: flashbang entindex (\d+))?\)?',
               extractors.player_threw),
    recognizer('money_change', actor +
               r' money change (\d+)\+?(-?\d+) = \$(\d+) \(tracked\)'
               r'(?: \(purchase: (\w+)\))?',
               extractors.player_money_change),
    recognizer('purchase', actor + r' purchased "(\w+)"',
               extractors.player_purchase),
    recognizer('picked_up', actor + r' picked up "(\w+)"',
               extractors.player_picked_up),
    recognizer('dropped', player % r'(TERRORIST|CT|Unassigned)' + r' dropped "(\w+)"',
               extractors.player_dropped),
    recognizer('bomb_got', actor + ' triggered "Got_The_Bomb"',
               extractors.player_bomb_got),
    recognizer('bomb_planted', actor + ' triggered "Planted_The_Bomb"',
               extractors.player_bomb_planted),
    recognizer('bomb_dropped', actor + ' triggered "Dropped_The_Bomb"',
               extractors.player_bomb_dropped),
    recognizer('bomb_begin_defuse', actor + ' triggered "Begin_Bomb_Defuse_With(out)?_Kit"',
               extractors.player_bomb_begin_defuse),
    recognizer('bomb_defused', actor + ' triggered "Defused_The_Bomb"',
               extractors.player_bomb_defused),
    recognizer('say', player % r'(TERRORIST|CT|Unassigned|)' + r' say(_team)? "(.*)"',
               extractors.player_say),
    recognizer('switched', r'"(.+?)<(\d+)><([\w:]+)>" switched from team <%s> to <%s>'
               % (team, team),
               extractors.player_switched),

    recognizer('connected', newcomer + r' connected, address "(.*)"',
               extractors.player_connected),
    recognizer('disconnected', player % r'(TERRORIST|CT|Unassigned|)' +
               r' disconnected \(reason "(.*)"\)',
               extractors.player_disconnected),
    recognizer('entered', newcomer + ' entered the game',
               extractors.player_entered),
    recognizer('banned', r'Banid: "(.+?)<(\d+)><([\w:]+)><\w*>" was banned "([\w. ]+)" by "(\w+)"',
               extractors.player_banned),

    recognizer('team_scored', r'Team "(CT|TERRORIST)" scored "(\d+)" with "(\d+)" players',
               extractors.team_scored),
    recognizer('team_notice', r'Team "(CT|TERRORIST)" triggered "(\w+)" \(CT "(\d+)"\) \(T "(\d+)"\)',
               extractors.team_notice),
    recognizer('match_start', r'World triggered "Match_Start" on "(.*)"',
               extractors.world_match_start),
    recognizer('round_start', r'World triggered "Round_Start"',
               extractors.world_round_start),
    recognizer('round_restart', r'World triggered "Restart_Round_\((\d+)_seconds?\)"',
               extractors.world_round_restart),
    recognizer('round_end', r'World triggered "Round_End"',
               extractors.world_round_end),
    recognizer('game_commencing', r'World triggered "Game_Commencing"',
               extractors.world_game_commencing),
    recognizer('freeze_time_start', 'Starting Freeze period',
               extractors.freeze_time_start),
    recognizer('projectile_spawned', 'Molotov projectile spawned at %s, velocity %s'
               % (fpos, fpos),
               extractors.projectile_spawned),
    recognizer('game_over', r'Game Over: (\w+) (\w+) (\w+) score (\d+):(\d+) after (\d+) min',
               extractors.game_over),

    recognizer('server_message', r'server_message: "(.*)"',
               extractors.server_message),
    recognizer('server_cvar', r'server_cvar: "(\w+)" "(.*)"',
               extractors.server_cvar),
    recognizer('get5_event', get5_event, extractors.get5_event),
    recognizer('rcon', r'rcon from "(.*):(\d+)": command "(.*)"',
               extractors.rcon),
)


def match(rec, text):
    """Return the captured groups of rec on text, or None.

    Unmatched optional groups are given as ''.
    """
    try:
        m = rec.grammar.parse_string(text)[0]
    except ParseException:
        return None
    return tuple(g or '' for g in m.groups())


def dispatch(time, text, recognizers=None):
    """Build the event for a payload already stripped of its timestamp."""
    if recognizers is None:
        recognizers = DEFAULT_RECOGNIZERS
    for r in recognizers:
        groups = match(r, text)
        if groups is None:
            continue
        try:
            return r.extractor(time, groups)
        except Malformed as e:
            log.debug('%s matched but is malformed (%s): %r', r.name, e, text)
            return Unknown(time, text)
    log.debug('Unrecognized payload: %r', text)
    return Unknown(time, text)


def split_line(line, framing='log'):
    """Split a line into its timestamp and payload.

    Raises NoMatch when the line lacks the prefix, BadTimestamp when the
    prefix does not hold a real date and time.
    """
    try:
        grammar, time_format = FRAMINGS[framing]
    except KeyError:
        raise ValueError('Unknown framing %r' % (framing,))

    line = line.rstrip('\r\n')
    try:
        result = grammar.parse_string(line)
    except ParseException as e:
        raise NoMatch('No log timestamp in %r' % line) from e
    try:
        timestamp = datetime.strptime(result['timestamp'], time_format)
    except ValueError as e:
        raise BadTimestamp('Invalid timestamp %r' % result['timestamp']) from e
    return timestamp, result.get('payload', '')


def parse(line, recognizers=None, framing='log'):
    """Parse one log line into an event.

    recognizers replaces the default table; it is anything
    make_recognizers accepts.  framing is 'log' for server log files and
    'http' for lines relayed over HTTP.
    """
    if recognizers is not None:
        recognizers = make_recognizers(recognizers)
    timestamp, text = split_line(line, framing)
    return dispatch(timestamp, text, recognizers)


def iter_events(lines, recognizers=None, framing='log', unparsed=None):
    """Yield an event for every line that carries a log timestamp.

    Lines that do not are skipped; if unparsed is a writable file they
    are written to it.
    """
    if recognizers is not None:
        recognizers = make_recognizers(recognizers)
    count = skipped = 0
    for line in lines:
        count += 1
        try:
            event = parse(line, recognizers, framing)
        except NoMatch as e:
            skipped += 1
            log.debug('Skipping line %d: %s', count, e)
            if unparsed is not None:
                print(line.rstrip('\r\n'), file=unparsed)
            continue
        yield event
    log.info('Read %d lines, %d unparsed', count, skipped)
