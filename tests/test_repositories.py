"""Repositories against real boto3 Table resources with stubbed responses.

The Stubber asserts the exact request each repository call sends, so these
tests pin the DynamoDB expressions: conditional puts, attribute_exists on
every mutation, SET clauses with placeholders, and scan pagination.
"""

from decimal import Decimal

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from artisthub.core.exceptions import ConditionFailedError
from artisthub.repositories import CastingRepository, UserRepository
from artisthub.services.dynamodb_service import build_set_update

NOW = "2025-06-01T10:00:00.000Z"


@pytest.fixture
def dynamodb():
    return boto3.resource(
        "dynamodb",
        region_name="ap-south-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def users(dynamodb):
    table = dynamodb.Table("users")
    with Stubber(table.meta.client) as stubber:
        yield UserRepository(table), stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def casting(dynamodb):
    table = dynamodb.Table("casting")
    with Stubber(table.meta.client) as stubber:
        yield CastingRepository(table), stubber
        stubber.assert_no_pending_responses()


def test_build_set_update_placeholders_every_field():
    expression, names, values = build_set_update({"view": 3, "status": "x"}, NOW)

    assert expression == "SET #view = :view, #status = :status, #updatedAt = :updatedAt"
    assert names == {"#view": "view", "#status": "status", "#updatedAt": "updatedAt"}
    assert values == {":view": 3, ":status": "x", ":updatedAt": NOW}


def test_get_item(users):
    repo, stubber = users
    stubber.add_response(
        "get_item",
        {"Item": {"userId": {"S": "u1"}, "view": {"N": "4"}}},
        {"TableName": "users", "Key": {"userId": "u1"}},
    )

    assert repo.get_item("u1") == {"userId": "u1", "view": Decimal("4")}


def test_get_item_missing_returns_none(users):
    repo, stubber = users
    stubber.add_response("get_item", {}, {"TableName": "users", "Key": {"userId": "u1"}})

    assert repo.get_item("u1") is None


def test_find_by_username_queries_index(users):
    repo, stubber = users
    stubber.add_response(
        "query",
        {"Items": [{"userId": {"S": "u1"}, "username": {"S": "asha"}}], "Count": 1},
        {
            "TableName": "users",
            "IndexName": "usernameIndex",
            "KeyConditionExpression": "username = :username",
            "ExpressionAttributeValues": {":username": "asha"},
        },
    )

    assert repo.find_by_username("asha") == {"userId": "u1", "username": "asha"}


def test_find_by_username_no_match(users):
    repo, stubber = users
    stubber.add_response("query", {"Items": [], "Count": 0}, {
        "TableName": "users",
        "IndexName": "usernameIndex",
        "KeyConditionExpression": "username = :username",
        "ExpressionAttributeValues": {":username": "ghost"},
    })

    assert repo.find_by_username("ghost") is None


def test_put_new_item_is_conditional_and_converts_floats(users):
    repo, stubber = users
    stubber.add_response("put_item", {}, {
        "TableName": "users",
        "Item": {"userId": "u1", "physicalStats": {"height": Decimal("5.5")}},
        "ConditionExpression": "attribute_not_exists(userId)",
    })

    repo.put_new_item({"userId": "u1", "physicalStats": {"height": 5.5}})


def test_put_new_item_existing_key(users):
    repo, stubber = users
    stubber.add_client_error(
        "put_item",
        service_error_code="ConditionalCheckFailedException",
        expected_params={
            "TableName": "users",
            "Item": {"userId": "u1"},
            "ConditionExpression": "attribute_not_exists(userId)",
        },
    )

    with pytest.raises(ConditionFailedError):
        repo.put_new_item({"userId": "u1"})


def test_other_client_errors_propagate(users):
    repo, stubber = users
    stubber.add_client_error("put_item", service_error_code="InternalServerError", http_status_code=500)

    with pytest.raises(ClientError):
        repo.put_new_item({"userId": "u1"})


def test_delete_item_requires_existing(users):
    repo, stubber = users
    stubber.add_client_error(
        "delete_item",
        service_error_code="ConditionalCheckFailedException",
        expected_params={
            "TableName": "users",
            "Key": {"userId": "u1"},
            "ConditionExpression": "attribute_exists(userId)",
        },
    )

    with pytest.raises(ConditionFailedError):
        repo.delete_item("u1")


def test_update_fields_sends_set_expression(users):
    repo, stubber = users
    stubber.add_response(
        "update_item",
        {"Attributes": {"userId": {"S": "u1"}, "aboutMe": {"S": "hi"}, "updatedAt": {"S": NOW}}},
        {
            "TableName": "users",
            "Key": {"userId": "u1"},
            "UpdateExpression": "SET #aboutMe = :aboutMe, #updatedAt = :updatedAt",
            "ConditionExpression": "attribute_exists(userId)",
            "ExpressionAttributeNames": {"#aboutMe": "aboutMe", "#updatedAt": "updatedAt"},
            "ExpressionAttributeValues": {":aboutMe": "hi", ":updatedAt": NOW},
            "ReturnValues": "ALL_NEW",
        },
    )

    assert repo.update_fields("u1", {"aboutMe": "hi"}, NOW) == {
        "userId": "u1", "aboutMe": "hi", "updatedAt": NOW,
    }


def test_update_missing_item_is_condition_failure(users):
    repo, stubber = users
    stubber.add_client_error("update_item", service_error_code="ConditionalCheckFailedException")

    with pytest.raises(ConditionFailedError):
        repo.update_fields("u1", {"aboutMe": "hi"}, NOW)


def test_append_to_list_creates_missing_list(users):
    repo, stubber = users
    entry = {"id": "w1", "brand": "Tata"}
    stubber.add_response(
        "update_item",
        {"Attributes": {"userId": {"S": "u1"}}},
        {
            "TableName": "users",
            "Key": {"userId": "u1"},
            "UpdateExpression": (
                "SET #list = list_append(if_not_exists(#list, :empty), :entry), #updatedAt = :now"
            ),
            "ConditionExpression": "attribute_exists(userId)",
            "ExpressionAttributeNames": {"#list": "workExperience", "#updatedAt": "updatedAt"},
            "ExpressionAttributeValues": {":empty": [], ":entry": [entry], ":now": NOW},
            "ReturnValues": "ALL_NEW",
        },
    )

    repo.append_to_list("u1", "workExperience", entry, NOW)


def test_increment_counter(users):
    repo, stubber = users
    stubber.add_response(
        "update_item",
        {"Attributes": {"userId": {"S": "u1"}, "view": {"N": "3"}}},
        {
            "TableName": "users",
            "Key": {"userId": "u1"},
            "UpdateExpression": "SET #counter = if_not_exists(#counter, :zero) + :inc, #updatedAt = :now",
            "ConditionExpression": "attribute_exists(userId)",
            "ExpressionAttributeNames": {"#counter": "view", "#updatedAt": "updatedAt"},
            "ExpressionAttributeValues": {":zero": 0, ":inc": 1, ":now": NOW},
            "ReturnValues": "ALL_NEW",
        },
    )

    assert repo.increment_counter("u1", "view", NOW)["view"] == 3


def test_list_page_passes_start_key(users):
    repo, stubber = users
    stubber.add_response(
        "scan",
        {"Items": [{"userId": {"S": "u3"}}], "Count": 1, "LastEvaluatedKey": {"userId": {"S": "u3"}}},
        {"TableName": "users", "Limit": 1, "ExclusiveStartKey": {"userId": "u2"}},
    )

    items, last_key = repo.list_page(1, {"userId": "u2"})

    assert items == [{"userId": "u3"}]
    assert last_key == {"userId": "u3"}


def test_list_page_last_page(users):
    repo, stubber = users
    stubber.add_response("scan", {"Items": [], "Count": 0}, {"TableName": "users", "Limit": 10})

    assert repo.list_page(10) == ([], None)


@pytest.mark.parametrize("search_type, expression, names", [
    ("category", "contains(basicDetails.#category, :q)", {"#category": "category"}),
    (
        "skills",
        "contains(#skills.#expertise, :q) OR contains(#skills.#languages, :q)",
        {"#skills": "skills", "#expertise": "expertise", "#languages": "languages"},
    ),
])
def test_user_search_filters(users, search_type, expression, names):
    repo, stubber = users
    stubber.add_response("scan", {"Items": [], "Count": 0}, {
        "TableName": "users",
        "Limit": 10,
        "FilterExpression": expression,
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": {":q": "Actor"},
    })

    assert repo.search("Actor", search_type, 10) == []


def test_user_search_by_username_has_no_attribute_names(users):
    repo, stubber = users
    stubber.add_response("scan", {"Items": [], "Count": 0}, {
        "TableName": "users",
        "Limit": 5,
        "FilterExpression": "contains(username, :q)",
        "ExpressionAttributeValues": {":q": "ash"},
    })

    repo.search("ash", "username", 5)


def test_casting_list_page_with_category(casting):
    repo, stubber = casting
    stubber.add_response("scan", {"Items": [], "Count": 0}, {
        "TableName": "casting",
        "Limit": 10,
        "FilterExpression": "jobCategory = :category",
        "ExpressionAttributeValues": {":category": "Acting"},
    })

    repo.list_page(10, None, "Acting")


def test_casting_category_search_is_equality(casting):
    repo, stubber = casting
    stubber.add_response("scan", {"Items": [], "Count": 0}, {
        "TableName": "casting",
        "Limit": 10,
        "FilterExpression": "jobCategory = :q",
        "ExpressionAttributeValues": {":q": "Acting"},
    })

    repo.search("Acting", "category", 10)


def test_iter_applications_follows_every_page(casting):
    repo, stubber = casting
    projection = {
        "ProjectionExpression": "#p0, #p1, #p2, #p3",
        "ExpressionAttributeNames": {
            "#p0": "jobId", "#p1": "jobTitle", "#p2": "jobCategory", "#p3": "appliedBy",
        },
    }
    stubber.add_response(
        "scan",
        {"Items": [{"jobId": {"S": "j1"}}], "Count": 1, "LastEvaluatedKey": {"jobId": {"S": "j1"}}},
        {"TableName": "casting", **projection},
    )
    stubber.add_response(
        "scan",
        {"Items": [{"jobId": {"S": "j2"}}], "Count": 1},
        {"TableName": "casting", "ExclusiveStartKey": {"jobId": "j1"}, **projection},
    )

    assert [job["jobId"] for job in repo.iter_applications()] == ["j1", "j2"]
