"""
Query payloads for the MyJDownloader list endpoints.

The API only returns the fields a query asks for.
"""

DOWNLOAD_LINKS_QUERY = [
    {
        "bytesLoaded": True,
        "bytesTotal": True,
        "enabled": True,
        "eta": True,
        "finished": True,
        "host": True,
        "running": True,
        "speed": True,
        "status": True,
        "url": True,
        "maxResults": -1,
        "startAt": 0,
    }
]

DOWNLOAD_PACKAGES_QUERY = [
    {
        "bytesLoaded": True,
        "bytesTotal": True,
        "childCount": True,
        "enabled": True,
        "eta": True,
        "finished": True,
        "running": True,
        "saveTo": True,
        "speed": True,
        "status": True,
        "maxResults": -1,
        "startAt": 0,
    }
]

COLLECTOR_LINKS_QUERY = [
    {
        "availability": True,
        "bytesTotal": True,
        "enabled": True,
        "status": True,
        "url": True,
        "maxResults": -1,
        "startAt": 0,
    }
]
