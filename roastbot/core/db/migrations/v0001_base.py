DDL = """
CREATE TABLE IF NOT EXISTS profiles (
  wallet_address      TEXT PRIMARY KEY,
  matches_balance     INTEGER NOT NULL DEFAULT 0 CHECK (matches_balance >= 0),
  league              TEXT NOT NULL DEFAULT 'shrimp' CHECK (league IN ('shrimp','dolphin','whale')),
  current_score       INTEGER NOT NULL DEFAULT 0 CHECK (current_score >= 0),
  shield_active_until INTEGER,
  last_daily_claim    TEXT NOT NULL DEFAULT '',
  created_ts          INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
CREATE INDEX IF NOT EXISTS idx_profiles_league_score ON profiles(league, current_score DESC);

CREATE TABLE IF NOT EXISTS jackpot (
  league TEXT PRIMARY KEY,
  amount INTEGER NOT NULL DEFAULT 0
);
INSERT OR IGNORE INTO jackpot(league, amount) VALUES ('shrimp',0), ('dolphin',0), ('whale',0);

CREATE TABLE IF NOT EXISTS game_actions (
  id            INTEGER PRIMARY KEY AUTOINCREMENT,
  actor_wallet  TEXT NOT NULL,
  target_wallet TEXT,
  action_type   TEXT NOT NULL CHECK (action_type IN ('stoke','shade','cope')),
  cost          INTEGER NOT NULL,
  outcome       TEXT NOT NULL DEFAULT 'success',
  created_ts    INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
CREATE INDEX IF NOT EXISTS idx_game_actions_actor ON game_actions(actor_wallet, created_ts);

CREATE TABLE IF NOT EXISTS wallet_links (
  user_id        TEXT PRIMARY KEY,
  wallet_address TEXT NOT NULL UNIQUE,
  linked_ts      INTEGER NOT NULL DEFAULT (strftime('%s','now'))
);
"""
def apply(con): con.executescript(DDL)
