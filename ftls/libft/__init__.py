"""Small character, number, memory, string, search and linked-list helpers."""