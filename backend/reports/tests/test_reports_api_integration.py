"""
Reports API Tests

Manager-only report endpoints and their CSV, Excel and PDF downloads.
"""
from datetime import datetime
from io import StringIO
from zoneinfo import ZoneInfo

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status

from reports.models import ZReport

STORE_TZ = ZoneInfo('America/Chicago')


@pytest.fixture
def sales_day(menu, place_order, cashier_user):
    place_order(
        [menu['bowl'].id, menu['chow_mein'].id, menu['orange_chicken'].id],
        '7.04', datetime(2024, 10, 15, 11, 30, tzinfo=STORE_TZ), staff=cashier_user,
    )
    place_order(
        [menu['egg_roll'].id], '2.17', datetime(2024, 10, 15, 12, 5, tzinfo=STORE_TZ),
        payment_type='TAMU_ID',
    )


@pytest.mark.django_db
class TestReportPermissions:
    """Test that reports are manager-only"""

    @pytest.mark.parametrize('method,url', [
        ('get', '/api/reports/sales/?from=2024-10-15&to=2024-10-15'),
        ('post', '/api/reports/x-report/'),
        ('get', '/api/reports/z-report/'),
        ('post', '/api/reports/z-report/'),
        ('get', '/api/reports/inventory/'),
        ('get', '/api/reports/busiest/'),
    ])
    def test_cashier_denied(self, cashier_client, method, url):
        response = getattr(cashier_client, method)(url)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_guest_denied(self, api_client, db):
        response = api_client.get('/api/reports/z-report/')
        assert response.status_code in [status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN]


@pytest.mark.django_db
class TestSalesReportAPI:
    """Test GET /api/reports/sales/"""

    def test_sales_report(self, manager_client, sales_day):
        response = manager_client.get('/api/reports/sales/', {'from': '2024-10-15', 'to': '2024-10-15'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert [row['name'] for row in response.data['items']] == [
            'Orange Chicken', 'Chow Mein', 'Chicken Egg Roll',
        ]

    def test_missing_range(self, manager_client, db):
        response = manager_client.get('/api/reports/sales/')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'message': 'Missing date range parameters'}

    def test_reversed_range(self, manager_client, db):
        response = manager_client.get('/api/reports/sales/', {'from': '2024-10-16', 'to': '2024-10-15'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_csv_download(self, manager_client, sales_day):
        response = manager_client.get(
            '/api/reports/sales/', {'from': '2024-10-15', 'to': '2024-10-15', 'format': 'csv'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'text/csv'
        assert 'attachment; filename="sales_report_' in response['Content-Disposition']
        content = response.content.decode('utf-8')
        assert content.startswith('Sales Report')
        assert 'Orange Chicken,7.00,2' in content

    def test_xlsx_download(self, manager_client, sales_day):
        response = manager_client.get(
            '/api/reports/sales/', {'from': '2024-10-15', 'to': '2024-10-15', 'format': 'xlsx'}
        )

        assert response['Content-Type'].startswith('application/vnd.openxmlformats')
        assert response.content[:2] == b'PK'

    def test_pdf_download(self, manager_client, sales_day):
        response = manager_client.get(
            '/api/reports/sales/', {'from': '2024-10-15', 'to': '2024-10-15', 'format': 'pdf'}
        )

        assert response['Content-Type'] == 'application/pdf'
        assert response.content.startswith(b'%PDF')


@pytest.mark.django_db
class TestXReportAPI:
    """Test POST /api/reports/x-report/"""

    def test_x_report(self, manager_client, sales_day):
        response = manager_client.post('/api/reports/x-report/', {'date': '2024-10-15'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['date'] == '2024-10-15'
        assert [row['hour'] for row in response.data['report']] == ['11:00', '12:00']
        assert response.data['report'][1]['tamu_id_sales'] == '2.17'

    def test_missing_date(self, manager_client, db):
        response = manager_client.post('/api/reports/x-report/', {}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_pdf_download(self, manager_client, sales_day):
        response = manager_client.post(
            '/api/reports/x-report/?format=pdf', {'date': '2024-10-15'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'application/pdf'
        assert 'x_report_' in response['Content-Disposition']


@pytest.mark.django_db
class TestZReportAPI:
    """Test GET and POST /api/reports/z-report/"""

    def test_close_day_once(self, manager_client, sales_day):
        first = manager_client.post('/api/reports/z-report/', {'date': '2024-10-15'}, format='json')
        second = manager_client.post('/api/reports/z-report/', {'date': '2024-10-15'}, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert first.data['created'] is True
        assert first.data['totals'] == {'totalTransactions': 2, 'totalSales': '9.21'}
        assert first.data['report'][0]['employee_name'] == 'Casey Cashier'

        assert second.status_code == status.HTTP_200_OK
        assert second.data['created'] is False
        assert second.data['id'] == first.data['id']
        assert ZReport.objects.count() == 1

    def test_list_newest_first(self, manager_client, db):
        manager_client.post('/api/reports/z-report/', {'date': '2024-10-14'}, format='json')
        manager_client.post('/api/reports/z-report/', {'date': '2024-10-15'}, format='json')

        response = manager_client.get('/api/reports/z-report/')

        assert response.status_code == status.HTTP_200_OK
        assert [row['business_date'] for row in response.data['reports']] == ['2024-10-15', '2024-10-14']

    def test_invalid_date(self, manager_client, db):
        response = manager_client.post('/api/reports/z-report/', {'date': 'tomorrow'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert ZReport.objects.count() == 0

    def test_csv_download(self, manager_client, sales_day):
        response = manager_client.post(
            '/api/reports/z-report/?format=csv', {'date': '2024-10-15'}, format='json'
        )

        assert response['Content-Type'] == 'text/csv'
        content = response.content.decode('utf-8')
        assert 'Total Transactions,2' in content
        assert 'Casey Cashier' in content


@pytest.mark.django_db
class TestOtherReportsAPI:
    """Test the inventory and busiest-day reports"""

    def test_inventory_usage(self, manager_client, inventory_items):
        response = manager_client.get('/api/reports/inventory/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'][0] == {'inventory_name': 'Cups', 'total_used': 250}

    def test_busiest_days_without_sales(self, manager_client, db):
        response = manager_client.get('/api/reports/busiest/')

        assert response.status_code == status.HTTP_200_OK
        assert [row['period'] for row in response.data['data']] == ['week', 'month', 'year']
        assert response.data['data'][0]['day'] == 'No data'


@pytest.mark.django_db
class TestGenerateZReportCommand:
    """Test the generate_zreport management command"""

    def test_generates_report(self, sales_day):
        out = StringIO()
        call_command('generate_zreport', '--date', '2024-10-15', stdout=out)

        assert 'Z report for 2024-10-15: 2 orders' in out.getvalue()
        assert ZReport.objects.get(business_date='2024-10-15').total_transactions == 2

    def test_rerun_is_harmless(self, sales_day):
        call_command('generate_zreport', '--date', '2024-10-15', stdout=StringIO())
        out = StringIO()
        call_command('generate_zreport', '--date', '2024-10-15', stdout=out)

        assert 'already exists' in out.getvalue()
        assert ZReport.objects.count() == 1

    def test_bad_date(self, db):
        with pytest.raises(CommandError):
            call_command('generate_zreport', '--date', '15-10-2024', stdout=StringIO())
