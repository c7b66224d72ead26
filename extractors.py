"""Field extractors: turn the captured groups of a recognizer into events.

Each extractor is called as ``extractor(time, groups)`` where ``groups`` is
the tuple of captured substrings, in pattern order, with unmatched optional
groups given as ''.  Numbers that do not parse become zero.  An extractor
whose nested value cannot be decoded raises Malformed instead.
"""
import logging

import get5
from logevents import *

log = logging.getLogger(__name__)


class Malformed(ValueError):
    """A recognizer matched but a nested value could not be decoded."""


def to_int(s):
    """Base-10 int of s, or 0 when s is not a number."""
    try:
        return int(s)
    except (TypeError, ValueError):
        return 0


def to_float(s):
    try:
        return float(s)
    except (TypeError, ValueError):
        return 0.0


def player(g, side=True):
    """Build a Player from name, id, steam id (and side) groups."""
    return Player(g[0], to_int(g[1]), g[2], g[3] if side else '')


def position(g):
    return Position(to_int(g[0]), to_int(g[1]), to_int(g[2]))


# server / world

def server_message(t, g):
    return ServerMessage(t, g[0])

def freeze_time_start(t, g):
    return FreezeTimeStart(t)

def world_match_start(t, g):
    return WorldMatchStart(t, g[0])

def world_round_start(t, g):
    return WorldRoundStart(t)

def world_round_restart(t, g):
    return WorldRoundRestart(t, to_int(g[0]))

def world_round_end(t, g):
    return WorldRoundEnd(t)

def world_game_commencing(t, g):
    return WorldGameCommencing(t)

def team_scored(t, g):
    return TeamScored(t, g[0], to_int(g[1]), to_int(g[2]))

def team_notice(t, g):
    return TeamNotice(t, g[0], g[1], to_int(g[2]), to_int(g[3]))

def server_cvar(t, g):
    return ServerCvar(t, g[0], g[1])


# connection lifecycle

def player_connected(t, g):
    return PlayerConnected(t, player(g, side=False), g[3])

def player_disconnected(t, g):
    return PlayerDisconnected(t, player(g), g[4])

def player_entered(t, g):
    return PlayerEntered(t, player(g, side=False))

def player_banned(t, g):
    return PlayerBanned(t, player(g, side=False), g[3], g[4])


# in-match actions

def player_switched(t, g):
    return PlayerSwitched(t, player(g, side=False), g[3], g[4])

def player_say(t, g):
    return PlayerSay(t, player(g), g[5], g[4] == '_team')

def player_purchase(t, g):
    return PlayerPurchase(t, player(g), g[4])

def player_picked_up(t, g):
    return PlayerPickedUp(t, player(g), g[4])

def player_dropped(t, g):
    return PlayerDropped(t, player(g), g[4])

def player_money_change(t, g):
    return PlayerMoneyChange(t, player(g),
                             Equation(to_int(g[4]), to_int(g[5]), to_int(g[6])),
                             g[7])


# combat

def player_kill(t, g):
    # g[15] is the text inside the optional trailing parenthesis,
    # e.g. "headshot" or "throughsmoke penetrated headshot".
    flags = g[15].split()
    return PlayerKill(t, player(g[0:4]), position(g[4:7]),
                      player(g[7:11]), position(g[11:14]), g[14],
                      'headshot' in flags, 'penetrated' in flags)

def player_kill_assist(t, g):
    return PlayerKillAssist(t, player(g[0:4]), player(g[4:8]))

def player_attack(t, g):
    return PlayerAttack(t, player(g[0:4]), position(g[4:7]),
                        player(g[7:11]), position(g[11:14]), g[14],
                        to_int(g[15]), to_int(g[16]), to_int(g[17]),
                        to_int(g[18]), g[19])

def player_killed_bomb(t, g):
    return PlayerKilledBomb(t, player(g), position(g[4:7]))

def player_killed_suicide(t, g):
    return PlayerKilledSuicide(t, player(g), position(g[4:7]), g[7])

def player_kill_other(t, g):
    return PlayerKillOther(t, player(g[0:4]), position(g[4:7]),
                           g[7], g[8], position(g[9:12]), g[12])


# bomb

def player_bomb_got(t, g):
    return PlayerBombGot(t, player(g))

def player_bomb_planted(t, g):
    return PlayerBombPlanted(t, player(g))

def player_bomb_dropped(t, g):
    return PlayerBombDropped(t, player(g))

def player_bomb_begin_defuse(t, g):
    return PlayerBombBeginDefuse(t, player(g), g[4] != 'out')

def player_bomb_defused(t, g):
    return PlayerBombDefused(t, player(g))


# grenades

def player_threw(t, g):
    # Only flashbangs carry an entity index.
    return PlayerThrew(t, player(g), g[4], position(g[5:8]), to_int(g[8]))

def player_blinded(t, g):
    return PlayerBlinded(t, player(g[0:4]), to_float(g[4]),
                         player(g[5:9]), to_int(g[9]))

def projectile_spawned(t, g):
    return ProjectileSpawned(
        t,
        PositionFloat(to_float(g[0]), to_float(g[1]), to_float(g[2])),
        Velocity(to_float(g[3]), to_float(g[4]), to_float(g[5])))


# match end, plugins, administration

def game_over(t, g):
    return GameOver(t, g[0], g[1], g[2],
                    to_int(g[3]), to_int(g[4]), to_int(g[5]))

def get5_event(t, g):
    """Decode the params object of a get5_event line.

    Raises Malformed when the params are not a JSON object of the
    expected shape; the dispatcher turns that into an Unknown event.
    """
    try:
        params = get5.decode_params(g[1])
    except ValueError as e:
        log.warning('Bad get5 params %r: %s', g[1], e)
        raise Malformed('get5 params: %s' % e)
    return Get5Event(t, g[0], params, g[2])

def rcon(t, g):
    try:
        port = int(g[1])
    except ValueError:
        raise Malformed('rcon port %r' % g[1])
    return Rcon(t, g[0], port, g[2])


def unknown(t, g):
    return Unknown(t, g[0])
