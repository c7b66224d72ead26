"""Typed events produced by logparser.

Every event is an immutable named tuple whose first field is the time of
the log line.  The discriminant is the class name, available as
``event.type``.
"""
from collections import namedtuple

Player = namedtuple('Player', 'name id steam_id side')
Position = namedtuple('Position', 'x y z')
PositionFloat = namedtuple('PositionFloat', 'x y z')
Velocity = namedtuple('Velocity', 'x y z')
Equation = namedtuple('Equation', 'a b result')

Get5EventParams = namedtuple(
    'Get5EventParams',
    'map_number map_name team1_name team1_score team1_series_score '
    'team2_name team2_score team2_series_score headshot weapon reason '
    'message file site stage victim attacker')
Get5EventParams.__new__.__defaults__ = (
    0, '', '', 0, 0, '', 0, 0, 0, '', 0, '', '', 0, '', '', '')

# The sub-event names get5 writes into its "event" key.
GET5_EVENTS = (
    'series_start', 'map_veto', 'map_pick', 'side_picked',
    'knife_start', 'knife_won', 'going_live', 'player_death',
    'round_end', 'side_swap', 'map_end', 'series_end',
    'backup_loaded', 'match_config_load_fail', 'client_say',
    'bomb_planted', 'bomb_defused', 'bomb_exploded',
    'player_connect', 'player_disconnect', 'team_ready', 'team_unready',
)

SIDES = ('CT', 'TERRORIST', 'Unassigned', '')


class Event(object):
    """Mixin shared by all event tuples.

    ``nested`` maps field names to the record type stored in them; it is
    what logjson uses to rebuild an event from plain data.
    """
    __slots__ = ()
    nested = {}

    @property
    def type(self):
        return self.__class__.__name__

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.type, tuple(self)))


def _event(name, fields, **nested):
    base = namedtuple(name, ['time'] + fields.split())
    cls = type(name, (Event, base), {'__slots__': (), 'nested': nested})
    cls.__module__ = __name__
    return cls


# server / world
ServerMessage = _event('ServerMessage', 'text')
FreezeTimeStart = _event('FreezeTimeStart', '')
WorldMatchStart = _event('WorldMatchStart', 'map')
WorldRoundStart = _event('WorldRoundStart', '')
WorldRoundRestart = _event('WorldRoundRestart', 'timeleft')
WorldRoundEnd = _event('WorldRoundEnd', '')
WorldGameCommencing = _event('WorldGameCommencing', '')
TeamScored = _event('TeamScored', 'side score num_players')
TeamNotice = _event('TeamNotice', 'side notice score_ct score_t')
ServerCvar = _event('ServerCvar', 'key value')

# connection lifecycle
PlayerConnected = _event('PlayerConnected', 'player address', player=Player)
PlayerDisconnected = _event('PlayerDisconnected', 'player reason',
                            player=Player)
PlayerEntered = _event('PlayerEntered', 'player', player=Player)
PlayerBanned = _event('PlayerBanned', 'player duration by', player=Player)

# in-match actions
PlayerSwitched = _event('PlayerSwitched', 'player from_side to_side',
                        player=Player)
PlayerSay = _event('PlayerSay', 'player text team', player=Player)
PlayerPurchase = _event('PlayerPurchase', 'player item', player=Player)
PlayerPickedUp = _event('PlayerPickedUp', 'player item', player=Player)
PlayerDropped = _event('PlayerDropped', 'player item', player=Player)
PlayerMoneyChange = _event('PlayerMoneyChange', 'player equation purchase',
                           player=Player, equation=Equation)

# combat
PlayerKill = _event(
    'PlayerKill',
    'attacker attacker_pos victim victim_pos weapon headshot penetrated',
    attacker=Player, attacker_pos=Position,
    victim=Player, victim_pos=Position)
PlayerKillAssist = _event('PlayerKillAssist', 'attacker victim',
                          attacker=Player, victim=Player)
PlayerAttack = _event(
    'PlayerAttack',
    'attacker attacker_pos victim victim_pos weapon damage damage_armor '
    'health armor hitgroup',
    attacker=Player, attacker_pos=Position,
    victim=Player, victim_pos=Position)
PlayerKilledBomb = _event('PlayerKilledBomb', 'player pos',
                          player=Player, pos=Position)
PlayerKilledSuicide = _event('PlayerKilledSuicide', 'player pos weapon',
                             player=Player, pos=Position)
# The victim of a "killed other" line is an entity (chicken, breakable),
# so its name and entity id are kept as text.
PlayerKillOther = _event(
    'PlayerKillOther',
    'attacker attacker_pos victim victim_id victim_pos weapon',
    attacker=Player, attacker_pos=Position, victim_pos=Position)

# bomb
PlayerBombGot = _event('PlayerBombGot', 'player', player=Player)
PlayerBombPlanted = _event('PlayerBombPlanted', 'player', player=Player)
PlayerBombDropped = _event('PlayerBombDropped', 'player', player=Player)
PlayerBombBeginDefuse = _event('PlayerBombBeginDefuse', 'player kit',
                               player=Player)
PlayerBombDefused = _event('PlayerBombDefused', 'player', player=Player)

# grenades
PlayerThrew = _event('PlayerThrew', 'player grenade pos entindex',
                     player=Player, pos=Position)
PlayerBlinded = _event('PlayerBlinded', 'victim duration attacker entindex',
                       victim=Player, attacker=Player)
ProjectileSpawned = _event('ProjectileSpawned', 'pos velocity',
                           pos=PositionFloat, velocity=Velocity)

# match end, plugins, administration
GameOver = _event('GameOver', 'mode map_group map score_ct score_t duration')
Get5Event = _event('Get5Event', 'matchid params event',
                   params=Get5EventParams)
Rcon = _event('Rcon', 'ip port command')

Unknown = _event('Unknown', 'raw')


EVENT_TYPES = dict((cls.__name__, cls) for cls in (
    ServerMessage, FreezeTimeStart, WorldMatchStart, WorldRoundStart,
    WorldRoundRestart, WorldRoundEnd, WorldGameCommencing, TeamScored,
    TeamNotice, ServerCvar,
    PlayerConnected, PlayerDisconnected, PlayerEntered, PlayerBanned,
    PlayerSwitched, PlayerSay, PlayerPurchase, PlayerPickedUp, PlayerDropped,
    PlayerMoneyChange,
    PlayerKill, PlayerKillAssist, PlayerAttack, PlayerKilledBomb,
    PlayerKilledSuicide, PlayerKillOther,
    PlayerBombGot, PlayerBombPlanted, PlayerBombDropped,
    PlayerBombBeginDefuse, PlayerBombDefused,
    PlayerThrew, PlayerBlinded, ProjectileSpawned,
    GameOver, Get5Event, Rcon,
    Unknown,
))
