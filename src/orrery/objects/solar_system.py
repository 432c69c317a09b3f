"""
Element table for the eight major planets.

Values are the JPL "Keplerian Elements for Approximate Positions of the
Major Planets" (E.M. Standish), the 3000 BC - 3000 AD fit (Table 2a),
with the extra mean-anomaly terms b, c, s, f for Jupiter through Neptune
(Table 2b). The Earth row is the Earth-Moon barycenter.

Each element is value_at_J2000 + rate * T, T in Julian centuries.
"""

from __future__ import annotations

from typing import List

from orrery.objects.planet import Planet
from orrery.physics.orbit import KeplerianElements

# fmt: off
PLANETS: List[Planet] = [
    Planet(
        name="Mercury",
        elements=KeplerianElements(
            a=0.38709843, a_rate=0.00000000,
            e=0.20563661, e_rate=0.00002123,
            i_deg=7.00559432, i_rate=-0.00590158,
            L_deg=252.25166724, L_rate=149472.67486623,
            lon_peri_deg=77.45771895, lon_peri_rate=0.15940013,
            node_deg=48.33961819, node_rate=-0.12214182,
        ),
        color="#b1adad",
        radius_px=3.0,
    ),
    Planet(
        name="Venus",
        elements=KeplerianElements(
            a=0.72332102, a_rate=-0.00000026,
            e=0.00676399, e_rate=-0.00005107,
            i_deg=3.39777545, i_rate=0.00043494,
            L_deg=181.97970850, L_rate=58517.81560260,
            lon_peri_deg=131.76755713, lon_peri_rate=0.05679648,
            node_deg=76.67261496, node_rate=-0.27274174,
        ),
        color="#e6c47a",
        radius_px=4.5,
    ),
    Planet(
        name="Earth",
        elements=KeplerianElements(
            a=1.00000018, a_rate=-0.00000003,
            e=0.01673163, e_rate=-0.00003661,
            i_deg=-0.00054346, i_rate=-0.01337178,
            L_deg=100.46691572, L_rate=35999.37306329,
            lon_peri_deg=102.93005885, lon_peri_rate=0.31795260,
            node_deg=-5.11260389, node_rate=-0.24123856,
        ),
        color="#6495ed",
        radius_px=4.8,
    ),
    Planet(
        name="Mars",
        elements=KeplerianElements(
            a=1.52371243, a_rate=0.00000097,
            e=0.09336511, e_rate=0.00009149,
            i_deg=1.85181869, i_rate=-0.00724757,
            L_deg=-4.56813164, L_rate=19140.29934243,
            lon_peri_deg=-23.91744784, lon_peri_rate=0.45223625,
            node_deg=49.71320984, node_rate=-0.26852431,
        ),
        color="#d2694b",
        radius_px=3.8,
    ),
    Planet(
        name="Jupiter",
        elements=KeplerianElements(
            a=5.20248019, a_rate=-0.00002864,
            e=0.04853590, e_rate=0.00018026,
            i_deg=1.29861416, i_rate=-0.00322699,
            L_deg=34.33479152, L_rate=3034.90371757,
            lon_peri_deg=14.27495244, lon_peri_rate=0.18199196,
            node_deg=100.29282654, node_rate=0.13024619,
            b=-0.00012452, c=0.06064060, s=-0.35635438, f=38.35125000,
        ),
        color="#d8a86b",
        radius_px=7.5,
    ),
    Planet(
        name="Saturn",
        elements=KeplerianElements(
            a=9.54149883, a_rate=-0.00003065,
            e=0.05550825, e_rate=-0.00032044,
            i_deg=2.49424102, i_rate=0.00451969,
            L_deg=50.07571329, L_rate=1222.11494724,
            lon_peri_deg=92.86136063, lon_peri_rate=0.54179478,
            node_deg=113.63998702, node_rate=-0.25015002,
            b=0.00025899, c=-0.13434469, s=0.87320147, f=38.35125000,
        ),
        color="#e3d19c",
        radius_px=6.8,
    ),
    Planet(
        name="Uranus",
        elements=KeplerianElements(
            a=19.18797948, a_rate=-0.00020455,
            e=0.04685740, e_rate=-0.00001550,
            i_deg=0.77298127, i_rate=-0.00180155,
            L_deg=314.20276625, L_rate=428.49512595,
            lon_peri_deg=172.43404441, lon_peri_rate=0.09266985,
            node_deg=73.96250215, node_rate=0.05739699,
            b=0.00058331, c=-0.97731848, s=0.17689245, f=7.67025000,
        ),
        color="#9fe3e8",
        radius_px=5.6,
    ),
    Planet(
        name="Neptune",
        elements=KeplerianElements(
            a=30.06952752, a_rate=0.00006447,
            e=0.00895439, e_rate=0.00000818,
            i_deg=1.77005520, i_rate=0.00022400,
            L_deg=304.22289287, L_rate=218.46515314,
            lon_peri_deg=46.68158724, lon_peri_rate=0.01009938,
            node_deg=131.78635853, node_rate=-0.00606302,
            b=-0.00041348, c=0.68346318, s=-0.10162547, f=7.67025000,
        ),
        color="#5b7cfa",
        radius_px=5.4,
    ),
]
# fmt: on
