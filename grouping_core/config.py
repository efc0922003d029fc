# grouping_core/config.py
from __future__ import annotations
import os
import textwrap

# ===== App defaults (mirror AppConfig) =====
DEFAULT_CONFIG = {
    "max_people": 26,           # exhaustive search; C(26,13) is about 10M candidates
    "batch_size": 4096,         # candidates scored per numpy batch
    "time_limit_s": None,       # no limit
    "log_level": "INFO",
    "store_path": "assets/people.json",
}

CONFIG_PATH = "assets/config.yaml"
SAMPLE_PEOPLE_PATH = "assets/sample_people.csv"


def ensure_assets_exist():
    os.makedirs("assets", exist_ok=True)
    if not os.path.exists(CONFIG_PATH):
        with open(CONFIG_PATH, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_YAML)
    if not os.path.exists(SAMPLE_PEOPLE_PATH):
        with open(SAMPLE_PEOPLE_PATH, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_PEOPLE_CSV)


DEFAULT_CONFIG_YAML = textwrap.dedent("""\
# Group splitter settings
max_people: 26
batch_size: 4096
time_limit_s: null
log_level: INFO
store_path: assets/people.json
""")

# ===== Sample class list =====
DEFAULT_SAMPLE_PEOPLE_CSV = textwrap.dedent("""\
id,name,category,special_needs,behavior_note,level,preferred_names
1,Anna Puig,girl,false,false,3,Marta Vila
2,Biel Soler,boy,false,true,2,Pau Roca
3,Carla Mas,girl,true,false,1,
4,David Ferrer,boy,false,false,4,"Biel Soler, Joan Riera"
5,Elena Costa,girl,false,false,2,Carla Mas
6,Ferran Pons,boy,true,false,2,
7,Gemma Font,girl,false,true,3,
8,Joan Riera,boy,false,false,3,David Ferrer
9,Marta Vila,girl,false,false,4,Anna Puig
10,Pau Roca,boy,false,false,1,
""")


# ===== Theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<style>
:root{
  --bg:#0b0e14;
  --surface: rgba(18, 22, 31, 0.78);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --good:#25d790; --warn:#ffb547; --danger:#ff6b6b;
  --radius:16px;
}
.block-container { padding-top: 1rem; max-width: 1200px; }
.card{
  background: var(--surface) !important;
  border:1px solid rgba(255,255,255,.05);
  border-radius:var(--radius);
  padding:14px 18px;
}
.small{color:var(--sub);font-size:12px}
.person{padding:4px 0;border-bottom:1px solid var(--line)}
.person.unmet{color:var(--warn)}
.tag{padding:2px 8px;border:1px solid var(--line);border-radius:999px;font-size:11px;margin-left:4px}
</style>
"""
