DDL = """
CREATE TABLE IF NOT EXISTS players (
  wallet_address        TEXT PRIMARY KEY,
  current_season_points INTEGER NOT NULL DEFAULT 0 CHECK (current_season_points >= 0),
  total_roasts          INTEGER NOT NULL DEFAULT 0 CHECK (total_roasts >= 0),
  last_active_ts        INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
CREATE INDEX IF NOT EXISTS idx_players_points ON players(current_season_points DESC);

CREATE TABLE IF NOT EXISTS seasons (
  id               INTEGER PRIMARY KEY AUTOINCREMENT,
  name             TEXT NOT NULL,
  start_ts         INTEGER NOT NULL,
  end_ts           INTEGER NOT NULL,
  is_active        INTEGER NOT NULL DEFAULT 0 CHECK (is_active IN (0,1)),
  current_pot_size INTEGER NOT NULL DEFAULT 0           -- centimes
);
-- une seule saison active à la fois
CREATE UNIQUE INDEX IF NOT EXISTS uq_seasons_active ON seasons(is_active) WHERE is_active = 1;

CREATE TABLE IF NOT EXISTS roast_logs (
  id              INTEGER PRIMARY KEY AUTOINCREMENT,
  roaster_address TEXT NOT NULL,
  target_address  TEXT NOT NULL,
  roast_type      TEXT NOT NULL,
  points_awarded  INTEGER NOT NULL DEFAULT 0,
  created_ts      INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
CREATE INDEX IF NOT EXISTS idx_roast_logs_pair ON roast_logs(roaster_address, target_address, created_ts);

CREATE TABLE IF NOT EXISTS attacks (
  id               INTEGER PRIMARY KEY AUTOINCREMENT,
  attacker_address TEXT NOT NULL,
  victim_address   TEXT NOT NULL,
  points_stolen    INTEGER NOT NULL,
  cost_amount      INTEGER NOT NULL,                    -- centimes
  created_ts       INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
CREATE INDEX IF NOT EXISTS idx_attacks_victim ON attacks(victim_address, created_ts);
"""
def apply(con): con.executescript(DDL)
