"""bfs_crawler.parser: извлечение заголовка и видимого текста из HTML."""
