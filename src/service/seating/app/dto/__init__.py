from src.service.seating.app.dto.batch_dto import BatchResult


__all__ = ['BatchResult']
