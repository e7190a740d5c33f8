"""
Слой приложения PDF Sync.

=== СТРУКТУРА ===
- pdfsync/application/files/  - сканирование каталога и выдача файлов
- pdfsync/application/sync/   - реестр наблюдателей и движок синхронизации

=== ПРИНЦИПЫ ===
- Зависит от Domain (модели, события, ошибки)
- Реестр внедряется в движок через конструктор, глобального состояния нет
"""
