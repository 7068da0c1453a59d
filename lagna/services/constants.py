import math

SIGN_NAMES = ["Aries","Taurus","Gemini","Cancer","Leo","Virgo","Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces"]

# Canonical chart order; charts always carry one slot per body in this order.
BODY_NAMES = ("Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn")

ASC, MC, IC = "ASC", "MC", "IC"
ANGLE_MARKERS = (ASC, MC, IC)


def normalize360(x: float) -> float:
    """Fold any real angle into [0, 360)."""

    y = math.fmod(x, 360.0)
    if y < 0.0:
        y += 360.0
    # fmod of a tiny negative value can round back up to exactly 360.0
    if y >= 360.0:
        y = 0.0
    return y

def sign_index_from_lon(lon: float) -> int:
    return min(int(normalize360(lon) // 30), 11)

def sign_name_from_lon(lon: float) -> str:
    return SIGN_NAMES[sign_index_from_lon(lon)]

def fmt_deg(lon: float) -> str:
    # 0..360 to "sign 12°34′56″"
    lon = normalize360(lon)
    sidx = sign_index_from_lon(lon)
    within = lon - sidx * 30.0
    deg = int(within)
    minutes_float = (within - deg) * 60
    mins = int(minutes_float)
    secs = int((minutes_float - mins) * 60)
    return f"{SIGN_NAMES[sidx]} {deg:02d}°{mins:02d}′{secs:02d}″"
