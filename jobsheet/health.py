# health.py - Health check and submission monitoring
import time
import psutil
import os
from typing import Dict, Any, List, Optional
from datetime import datetime
from jdutils.config import Config, config
from jdutils.logger import logger


class HealthChecker:
    """Process health plus submission counters"""

    def __init__(self):
        self.start_time = time.time()
        self.request_count = 0
        self.error_count = 0
        self.submit_times: List[float] = []

    def get_system_health(self) -> Dict[str, Any]:
        """System and process resource usage"""
        try:
            memory = psutil.virtual_memory()
            memory_usage = {
                "total": memory.total,
                "available": memory.available,
                "percent": memory.percent,
                "used": memory.used
            }

            cpu_percent = psutil.cpu_percent(interval=None)

            process = psutil.Process(os.getpid())
            process_info = {
                "pid": process.pid,
                "memory_mb": process.memory_info().rss / 1024 / 1024,
                "create_time": process.create_time()
            }

            return {
                "status": "healthy",
                "timestamp": datetime.now().isoformat(),
                "uptime_seconds": time.time() - self.start_time,
                "memory": memory_usage,
                "cpu_percent": cpu_percent,
                "process": process_info,
                "requests": {
                    "total": self.request_count,
                    "errors": self.error_count,
                    "success_rate": 100.0 if self.request_count == 0 else (self.request_count - self.error_count) / self.request_count * 100
                }
            }

        except (psutil.Error, OSError) as e:
            logger.error(f"Health check failed: {e}")
            return {
                "status": "unhealthy",
                "timestamp": datetime.now().isoformat(),
                "error": str(e)
            }

    def get_sheets_health(self, settings: Optional[Config] = None) -> Dict[str, Any]:
        """Whether the spreadsheet destination is fully configured (no network call)"""
        settings = settings or config
        missing = settings.missing_sheets_settings()
        return {
            "status": "configured" if not missing else "misconfigured",
            "tab": settings.TAB_NAME,
            "missing": missing,
        }

    def record_request(self, success: bool = True, submit_time: Optional[float] = None):
        """Count one submission"""
        self.request_count += 1
        if not success:
            self.error_count += 1

        if submit_time is not None:
            self.submit_times.append(submit_time)
            # keep the latest 100
            if len(self.submit_times) > 100:
                self.submit_times = self.submit_times[-100:]

    def get_performance_metrics(self) -> Dict[str, Any]:
        """Submission latency summary"""
        if not self.submit_times:
            return {"submit_times": "no_data"}

        submit_times = self.submit_times
        return {
            "submit_times": {
                "count": len(submit_times),
                "mean": sum(submit_times) / len(submit_times),
                "min": min(submit_times),
                "max": max(submit_times),
                "p95": sorted(submit_times)[int(len(submit_times) * 0.95)] if len(submit_times) > 20 else max(submit_times)
            }
        }


# Global health checker instance
health_checker = HealthChecker()


def health_check(settings: Optional[Config] = None) -> Dict[str, Any]:
    """Health endpoint payload"""
    system_health = health_checker.get_system_health()
    sheets_health = health_checker.get_sheets_health(settings)
    performance_metrics = health_checker.get_performance_metrics()

    return {
        **system_health,
        "sheets": sheets_health,
        "performance": performance_metrics
    }
