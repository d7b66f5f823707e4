from kundali_chart.services.chart_service import ChartService


def get_chart_service() -> ChartService:
    """
    Chart service dependency.

    Override in tests to swap the astrology API client.
    """
    return ChartService()
