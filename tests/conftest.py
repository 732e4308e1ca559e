import pytest

from data_fetch.data_loader import load

OBSERVATIONS = """site_name,parameter,value,unit,date_time
SiteA,pH,7.1,std units,2024-01-01
SiteA,pH,7.3,std units,2024-01-02
SiteA,Temperature,12.5,deg C,2024-01-01
SiteA,Temperature,,deg C,2024-01-03
SiteB,pH,6.8,std units,2024-02-10 08:15:00
SiteB,Temperature,9.0,deg C,2024-03-05
SiteC,pH,7.9,std units,2023-12-31
Orphan,pH,7.0,std units,2024-01-05
"""

SITES = """site_name,latitude,longitude,aquatic_life_use
SiteA,47.31,-122.20,Core Summer Salmonid Habitat
SiteB,47.21,-122.29,Salmonid Spawning
SiteC,,-122.56,Salmonid Rearing
SiteD,46.93,-122.55,Core Summer Salmonid Habitat
"""


def write_csv(directory, name, text):
    path = directory / name
    path.write_text(text)
    return path


@pytest.fixture
def observations_csv(tmp_path):
    return write_csv(tmp_path, "wqp_data.csv", OBSERVATIONS)


@pytest.fixture
def sites_csv(tmp_path):
    return write_csv(tmp_path, "streams_sites.csv", SITES)


@pytest.fixture
def data(observations_csv, sites_csv):
    return load(observations_csv, sites_csv)
