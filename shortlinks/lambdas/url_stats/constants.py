# Log events
URL_STATS_SUCCESS = 'URL_STATS_SUCCESS'
