"""
Employee Management API Tests

Manager-only employee CRUD, the role-change shortcut and employment status.
"""
import pytest
from rest_framework import status

from users.models import User


@pytest.mark.django_db
class TestEmployeeAPIAuthentication:
    """Test that employee management is manager-only"""

    def test_cashier_denied(self, cashier_client):
        assert cashier_client.get('/api/employees/').status_code == status.HTTP_403_FORBIDDEN

    def test_guest_denied(self, api_client, db):
        response = api_client.get('/api/employees/')
        assert response.status_code in [status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN]


@pytest.mark.django_db
class TestEmployeeAPIOperations:
    """Test hiring, updating and letting go of employees"""

    def test_list_includes_former_employees(self, manager_client, cashier_user, kitchen_user):
        kitchen_user.archive()

        response = manager_client.get('/api/employees/')

        assert response.status_code == status.HTTP_200_OK
        rows = {row['username']: row for row in response.data['results']}
        assert rows['kitchen']['status'] == 'Not Employed'
        assert rows['cashier']['status'] == 'Employed'
        assert rows['cashier']['position'] == 'Cashier'
        assert 'password' not in rows['cashier']

    def test_create_employee(self, manager_client):
        response = manager_client.post('/api/employees/', {
            'name': 'Jamie Lee',
            'position': 'cashier',
            'status': 'Employed',
            'password': 'secret123',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['position'] == 'Cashier'
        employee = User.objects.get(pk=response.data['id'])
        assert employee.username == 'jamie.lee'
        assert employee.check_password('secret123')

    def test_generated_usernames_are_unique(self, manager_client):
        first = manager_client.post('/api/employees/', {'name': 'Sam Wu', 'position': 'Kitchen'}, format='json')
        second = manager_client.post('/api/employees/', {'name': 'Sam Wu', 'position': 'Kitchen'}, format='json')

        assert first.data['username'] == 'sam.wu'
        assert second.data['username'] == 'sam.wu2'

    def test_create_missing_fields(self, manager_client):
        response = manager_client.post('/api/employees/', {'name': 'No Position'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Missing required fields'

    def test_create_invalid_position(self, manager_client):
        response = manager_client.post('/api/employees/', {'name': 'Pat', 'position': 'Owner'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_duplicate_username(self, manager_client, cashier_user):
        response = manager_client.post('/api/employees/', {
            'name': 'Other Cashier', 'position': 'Cashier', 'username': 'cashier',
        }, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_put_updates_supplied_fields(self, manager_client, cashier_user):
        response = manager_client.put(
            f'/api/employees/{cashier_user.id}/', {'position': 'Manager'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        cashier_user.refresh_from_db()
        assert cashier_user.role == User.Role.MANAGER
        assert cashier_user.name == 'Casey Cashier'

    def test_put_without_fields_rejected(self, manager_client, cashier_user):
        response = manager_client.put(f'/api/employees/{cashier_user.id}/', {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'No fields to update'

    def test_status_change_archives(self, manager_client, cashier_user):
        manager_client.patch(f'/api/employees/{cashier_user.id}/', {'status': 'Not Employed'}, format='json')

        cashier_user.refresh_from_db()
        assert cashier_user.is_active is False

        manager_client.patch(f'/api/employees/{cashier_user.id}/', {'status': 'Employed'}, format='json')
        cashier_user.refresh_from_db()
        assert cashier_user.is_active is True

    def test_delete_archives(self, manager_client, cashier_user):
        response = manager_client.delete(f'/api/employees/{cashier_user.id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert User.objects.with_archived().get(pk=cashier_user.pk).is_active is False


@pytest.mark.django_db
class TestRoleChange:
    """Test the PUT /api/employees/role/ shortcut"""

    def test_change_role(self, manager_client, kitchen_user):
        response = manager_client.put('/api/employees/role/', {
            'staffId': kitchen_user.id, 'newPosition': 'Cashier',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['employee']['position'] == 'Cashier'

    def test_unknown_employee(self, manager_client):
        response = manager_client.put('/api/employees/role/', {
            'staffId': 9999, 'newPosition': 'Cashier',
        }, format='json')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_invalid_position(self, manager_client, kitchen_user):
        response = manager_client.put('/api/employees/role/', {
            'staffId': kitchen_user.id, 'newPosition': 'Chef',
        }, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
