"""One payload of every event type, as a CS:GO server writes it."""

CT = '"Player1<5><STEAM_1:1:111><CT>"'
T = '"Player2<6><STEAM_1:0:222><TERRORIST>"'

PAYLOADS = [
    ('server_message: "quit"', 'ServerMessage'),
    ('Starting Freeze period', 'FreezeTimeStart'),
    ('World triggered "Match_Start" on "de_dust2"', 'WorldMatchStart'),
    ('World triggered "Round_Start"', 'WorldRoundStart'),
    ('World triggered "Restart_Round_(3_seconds)"', 'WorldRoundRestart'),
    ('World triggered "Round_End"', 'WorldRoundEnd'),
    ('World triggered "Game_Commencing"', 'WorldGameCommencing'),
    ('Team "CT" scored "7" with "4" players', 'TeamScored'),
    ('Team "TERRORIST" triggered "SFUI_Notice_Terrorists_Win" (CT "3") (T "5")',
     'TeamNotice'),
    ('server_cvar: "mp_freezetime" "15"', 'ServerCvar'),

    ('"Player1<5><STEAM_1:1:111><>" connected, address "10.0.0.1:27005"',
     'PlayerConnected'),
    (CT + ' disconnected (reason "Disconnect")', 'PlayerDisconnected'),
    ('"Player1<5><STEAM_1:1:111><>" entered the game', 'PlayerEntered'),
    ('Banid: "Player1<5><STEAM_1:1:111><>" was banned "for 5.00 minutes" by "Console"',
     'PlayerBanned'),

    ('"Player1<5><STEAM_1:1:111>" switched from team <Unassigned> to <CT>',
     'PlayerSwitched'),
    (CT + ' say_team "rush b"', 'PlayerSay'),
    (CT + ' purchased "ak47"', 'PlayerPurchase'),
    (CT + ' picked up "deagle"', 'PlayerPickedUp'),
    (CT + ' dropped "deagle"', 'PlayerDropped'),
    (CT + ' money change 800-200 = $600 (tracked) (purchase: weapon_flashbang)',
     'PlayerMoneyChange'),

    (CT + ' [-100 200 -30] killed ' + T + ' [50 -60 70] with "ak47" (headshot penetrated)',
     'PlayerKill'),
    (CT + ' assisted killing ' + T, 'PlayerKillAssist'),
    (CT + ' [-100 200 -30] attacked ' + T + ' [50 -60 70] with "ak47"'
     ' (damage "27") (damage_armor "3") (health "73") (armor "97")'
     ' (hitgroup "left leg")', 'PlayerAttack'),
    (CT + ' [-100 200 -30] was killed by the bomb.', 'PlayerKilledBomb'),
    (CT + ' [-100 200 -30] committed suicide with "world"', 'PlayerKilledSuicide'),
    (CT + ' [-100 200 -30] killed other "chicken<102>" [1 2 3] with "knife"',
     'PlayerKillOther'),

    (T + ' triggered "Got_The_Bomb"', 'PlayerBombGot'),
    (T + ' triggered "Planted_The_Bomb"', 'PlayerBombPlanted'),
    (T + ' triggered "Dropped_The_Bomb"', 'PlayerBombDropped'),
    (CT + ' triggered "Begin_Bomb_Defuse_With_Kit"', 'PlayerBombBeginDefuse'),
    (CT + ' triggered "Defused_The_Bomb"', 'PlayerBombDefused'),

    (CT + ' threw flashbang [-100 200 -30] flashbang entindex 178)', 'PlayerThrew'),
    (T + ' blinded for 2.58 by ' + CT + ' from flashbang entindex 178 ',
     'PlayerBlinded'),
    ('Molotov projectile spawned at 123.5 -45.25 10.0, velocity -100.5 200.0 0.5',
     'ProjectileSpawned'),

    ('Game Over: competitive mg_active de_dust2 score 16:10 after 45 min',
     'GameOver'),
    ('get5_event: {"matchid":"42","params":{"map_number":1,'
     '"map_name":"de_inferno","team1_name":"Alpha","team2_name":"Bravo"},'
     '"event":"going_live"}', 'Get5Event'),
    ('rcon from "192.168.1.10:53412": command "status"', 'Rcon'),

    ('some totally unrecognized freeform text', 'Unknown'),
]

PREFIX = 'L 10/15/2022 - 18:30:30: '
