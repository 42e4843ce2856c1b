# Log events
LIST_URLS_SUCCESS = 'LIST_URLS_SUCCESS'
