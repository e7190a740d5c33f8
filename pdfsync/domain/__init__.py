"""
Доменный слой PDF Sync: модели файлов, события push-канала и ошибки доступа.
Не зависит от FastAPI, watchdog и файловой системы.
"""
